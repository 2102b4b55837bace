"""
Command line host for digestkit. Commands are discovered by cli.main.
"""
