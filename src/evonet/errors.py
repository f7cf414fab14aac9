"""
Error Module

This module defines the exceptions raised by evonet. All of them signal a
violated precondition on malformed input: they are raised immediately and
deterministically, and are never retried.

Every concrete error also derives from ValueError, so callers already catching
ValueError keep working.

Classes:
    EvolutionError:                 Base class of every evonet error
    InvalidConfigError:             Bad configuration or topology
    InvalidDnaError:                Malformed DNA string or non-encodable gene
    EmptyPopulationError:           Operation over zero individuals
    ArityMismatchError:             Vectors of incompatible length
    DataExhaustedError:             Flat parameter sequence ran out of values
    TrailingDataError:              Flat parameter sequence has leftover values
    UndefinedSelectionWeightsError: Fitness distribution cannot drive selection
"""

class EvolutionError(Exception):
    """Base class for all evonet errors."""

class InvalidConfigError(EvolutionError, ValueError):
    """A configuration value (mutation chance, topology, ...) is out of range."""

class InvalidDnaError(EvolutionError, ValueError):
    """A DNA string cannot be decoded, or a gene cannot be encoded."""

class EmptyPopulationError(EvolutionError, ValueError):
    """An operation that needs at least one individual got none."""

class ArityMismatchError(EvolutionError, ValueError):
    """Two vectors that must have the same length do not."""

class DataExhaustedError(EvolutionError, ValueError):
    """A flat parameter sequence does not fully hydrate the requested topology."""

class TrailingDataError(DataExhaustedError):
    """A flat parameter sequence holds more values than the topology consumes."""

class UndefinedSelectionWeightsError(EvolutionError, ValueError):
    """Fitness values are negative, non-finite or missing."""
