from .cli import main

# No error handling here. All catch-all handling lives in cli.main() so that
# both `python -m metacmd` and the installed `metacmd` script entry point go
# through exactly the same code path.
if __name__ == "__main__":
    main()
