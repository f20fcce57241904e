from typed_vite_cli import main

main()
