"""suiflow: copy blockchain UI component templates into a Next.js project.

Import from submodules:
- catalog: COMPONENTS and component name transforms
- core.installer: install_requested, install_dependencies
- cli.cli: the `suiflow` console script
"""

__version__ = "0.1.0"
