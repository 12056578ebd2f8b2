from cli_todo.main import main

main()
