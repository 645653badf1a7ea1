"""
This package contains helpful mixin classes to provide basic functionality throughout orientation.
"""

from orientation.utilities.mixin_classes.attribute_printing import AttributePrinting
from orientation.utilities.mixin_classes.user_option_configured import UserOptionConfigured

__all__ = ["AttributePrinting", "UserOptionConfigured"]
