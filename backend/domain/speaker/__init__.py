"""Speaker domain module.

Speakers are transient records returned by a speaker repository.
Nothing in this domain is persisted.
"""
