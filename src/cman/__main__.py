from .cli import main

# All error handling lives in cli.main() so `python -m cman` and the
# installed `cman` script behave the same.
if __name__ == "__main__":
    main()
