# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Error taxonomy for the propagation core.

Both classes derive from ValueError so existing ``except ValueError``
handlers at the edges keep catching them.
"""


class ConfigurationError(ValueError):
    """Invalid or missing configuration: bad elements, body or reference."""


class PreconditionViolation(ValueError):
    """Call argument outside the documented domain (e.g. negative time)."""
