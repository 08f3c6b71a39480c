"""
netint - Linode network internals client

Entry point for running as a module:
    python -m netint <region>
"""

from .cli import main

if __name__ == '__main__':
    main()
