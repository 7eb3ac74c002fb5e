from mddocs.cli.main import main

main()
