from ncshell.cli import main

main()
