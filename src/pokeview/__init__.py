"""pokeview: navegador de Pokémon sobre PokeAPI para la terminal."""

__version__ = "0.1.0"
