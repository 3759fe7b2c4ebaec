"""
CLI entry point, when used as a module: `python -m kubefix`.

Useful for debugging in the IDEs (use the start-mode "Module", module "kubefix").
"""
from kubefix import cli

if __name__ == '__main__':
    cli.main()
