"""
Beacon CLI - Command-line interface for sensor coverage queries.

Usage:
    beacon-cli count-row data/sample.txt --row 10
    beacon-cli bbox data/sample.txt
    beacon-cli find-gap data/sample.txt --bounds 0 0 20 20
    beacon-cli tuning-frequency data/sample.txt --bounds 0 0 20 20
"""

__version__ = "1.0.0"
