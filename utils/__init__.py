"""Helpers shared by the analysis pipeline"""
