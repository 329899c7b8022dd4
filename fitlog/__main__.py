from fitlog.main import main

main()
