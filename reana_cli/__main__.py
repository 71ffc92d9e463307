from reana_cli.cli.app import main

main()
