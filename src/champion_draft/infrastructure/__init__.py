"""
Infrastructure Layer - Adapters

Repositories, snapshot codec, configuration and champion catalogue.
"""
