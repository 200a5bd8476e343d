"""
Services module for creatorkit.

Contains the request pipeline (quota gate, page fetcher, extraction and
the tools service that ties them together) and the offline calculators.
"""
