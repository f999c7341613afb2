from create_sid_react_app.cli import main

main()
