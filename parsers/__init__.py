"""File parsers that turn uploaded bytes into records"""
