"""Extension layer — plugin system via pluggy.

Discovery: ``notichain.plugins`` entry points plus single-file plugins
in the configured local directory.
INVARIANT: Plugin failures are warnings, never errors.
"""

from notichain.plugins.manager import PluginManager

__all__ = ["PluginManager"]
