from column_coverage.cli import main

main()
