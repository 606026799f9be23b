from apksign.cli.app import main

main()
