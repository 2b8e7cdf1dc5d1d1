from coverage_explorer.cli import main

main()
