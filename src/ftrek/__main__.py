from ftrek.cli.main import main

main()
