from swagcli.app import main

main()
