"""
Core package for the Price and Swap Bot.

Submodules are imported explicitly (``swapbot.settings.config``,
``swapbot.logging``, ``swapbot.clients.router``) so that importing the
package itself stays side-effect free.
"""
