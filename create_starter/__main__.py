from create_starter.pipeline import main

main()
