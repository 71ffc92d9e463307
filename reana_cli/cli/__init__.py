"""
Command Line Interface for the REANA client.
"""
