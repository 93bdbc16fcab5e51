from dynamo_new.cli import main

main()
