"""Version information for resx-naming."""

__version__ = "1.2.0"
__author__ = "Sezgin Paksoy"
__description__ = "Culture and naming metadata for .resx and .resw resource files"

# Changelog:
# 1.2.0 - Directory scan
#       - New 'scan' command groups resource files by base directory and name
#       - JSON reports for 'inspect' and 'scan'
#       - Designer files are skipped while scanning
#
# 1.1.0 - .resw support
#       - Culture taken from the first culture-named directory of the path
#       - Base language directory and sub directory helpers
#       - Sibling paths rebuilt with the target culture directory
#       - Neutral resources language setting for .resw projects
#
# 1.0.0 - Initial release
#       - .resx culture qualifiers, base names and sibling file names
#       - Culture name validation with custom culture support
