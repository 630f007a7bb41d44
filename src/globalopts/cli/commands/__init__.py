"""CLI commands for globalopts.

Commands:
- usage: Help block for an encoding string
- bind: Bound option table for an encoding string
- parse: Apply a sample command line to a fresh settings record
"""
