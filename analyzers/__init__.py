"""Column classification, statistics and chart selection"""
