"""Shared constants used across the application."""

# Capability required to view and change the Translation Stats settings.
MANAGE_OPTIONS = "manage_options"

# Anti-forgery token action and the form field that carries it.
NONCE_ACTION = "tstats_action"
NONCE_FIELD = "tstats_nonce_check"
NONCE_HEADER = "X-TStats-Nonce"

# Submit button names of the Tools tab actions.
RESET_SETTINGS_ACTION = "reset_settings"
DELETE_TRANSIENTS_ACTION = "delete_transients"

# Settings sections (each one is also the page it is displayed on).
SECTION_PLUGINS = "tstats_settings__plugins"
SECTION_GENERAL = "tstats_settings__general"
SECTION_TOOLS_SETTINGS = "tstats_settings__tools__settings"
SECTION_TOOLS_TRANSIENTS = "tstats_settings__tools__transients"
SECTION_HIDDEN = "tstats_settings__hidden"

# Top-level keys of the settings blob.
PATH_SETTINGS = "settings"
PATH_PLUGINS = "plugins"

SITE_DEFAULT_LANGUAGE = "site-default"

TRANSIENT_KEY_PREFIX = "transient:"
