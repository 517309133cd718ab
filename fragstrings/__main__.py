from fragstrings.cli import main

main()
