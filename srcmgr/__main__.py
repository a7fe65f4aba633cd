from .main import sync_main

sync_main()
