"""Run with: python -m wavesuperposition"""
import sys

from wavesuperposition.main import main

if __name__ == "__main__":
    sys.exit(main())
