"""Shared help text for the init command."""

INIT_COMMAND_DOC = """
Create a new TypeScript React project from the Typed Vite React template.

What happens:
- Prompts for the project name, description and license
- Clones the template into DIRECTORY (or into the current directory for '.')
- Rewrites package.json and README.md with your answers
- Initializes a fresh git repository
- Installs dependencies with yarn (unless --skip-install)

DIRECTORY must not exist yet. '.' is accepted when the current directory is
empty apart from .git or node_modules.

Environment:
  TYPED_VITE_TEMPLATE_REPO    Clone a different template repository
  TYPED_VITE_PACKAGE_MANAGER  Package manager used for install (default: yarn)
  TYPED_VITE_LOG_LEVEL        Log level for diagnostics (default: WARNING)

Examples:
  create-typed-vite-react my-project
  create-typed-vite-react .
  create-typed-vite-react my-project --skip-install
"""

USAGE_EXAMPLES = (
    "Example: create-typed-vite-react my-project",
    "Example: create-typed-vite-react .",
)
