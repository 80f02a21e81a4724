"""
CLI entry point, when used as a module: `python -m hostfqdn`.

Useful for debugging in the IDEs (use the start-mode "Module", module "hostfqdn").
"""
from hostfqdn import cli

if __name__ == '__main__':
    cli.main()
