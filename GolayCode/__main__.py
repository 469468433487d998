from GolayCode.cli import main

main()
