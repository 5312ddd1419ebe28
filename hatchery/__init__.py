"""Procedural creature genetics for the Cosmic Hatchery game.

The package turns static species/rarity/personality/cosmic tables and an
injected random source into immutable ``GeneticProfile`` records.
"""

__version__ = "1.0.0"
