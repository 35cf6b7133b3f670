from usersvc.app import main

main()
