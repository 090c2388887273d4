from entity_scaffold.cli import main

main()
