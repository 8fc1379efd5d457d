"""
Pytest configuration: point Django at the project settings before any test imports views.
"""
import os

import django

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")
django.setup()
