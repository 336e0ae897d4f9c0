"""Routing: segment trie and two-slot route table with O(path-depth) matching.

Patterns are registered and unregistered at any time; resolution walks
the trie once per lookup.
"""
