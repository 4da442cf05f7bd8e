"""Run with: python -m recursivetree"""
from recursivetree.main import main

if __name__ == "__main__":
    main()
