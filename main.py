"""Write APIDiff.yml listing documented symbols missing from the API descriptions."""

from apidiff.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
