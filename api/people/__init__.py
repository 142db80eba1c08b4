"""
Person directory feature: create, list and look up people.
"""
