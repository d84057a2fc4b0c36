from tinytools.cli.main_cli import main

main()
