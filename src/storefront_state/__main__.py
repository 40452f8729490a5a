from storefront_state.main import main

main()
