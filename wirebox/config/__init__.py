"""
Configuration package for wirebox
"""

from wirebox.config.settings import ContainerSettings, load_settings

__all__ = ['ContainerSettings', 'load_settings']
