from puzzle2048.control import main

main()
