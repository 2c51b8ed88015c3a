"""Run with: python -m cocoaconv"""

from cocoaconv.cli import main

main()
