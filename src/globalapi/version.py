"""Version of this build of globalapi."""

VERSION = "1.4.0"
