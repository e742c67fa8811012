from hashpass.app import main

main()
