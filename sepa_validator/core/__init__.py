"""
SEPA Validator - Core

Configuration and exception types shared by every stage of the validator.
"""
