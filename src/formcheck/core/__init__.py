"""
Core models, text validators and rule recipes.
"""
