"""Main window mixins for HatOverlayEditor"""
from .config_mixin import ConfigMixin
from .event_mixin import EventMixin
from .menu_mixin import MenuMixin
from .ui_setup_mixin import UISetupMixin

__all__ = ['ConfigMixin', 'EventMixin', 'MenuMixin', 'UISetupMixin']
