"""
Pytest configuration and shared fixtures.

This file is automatically loaded by pytest and provides
fixtures available to all test files.
"""

import pytest

from bacon.graph import LabeledGraph, build_path_tree


@pytest.fixture
def chain_graph() -> LabeledGraph:
    """A - B - C linked by {"M1"}, D isolated."""
    graph = LabeledGraph()
    for v in "ABCD":
        graph.insert_vertex(v)
    graph.insert_undirected("A", "B", {"M1"})
    graph.insert_undirected("B", "C", {"M1"})
    return graph


@pytest.fixture
def chain_tree(chain_graph: LabeledGraph) -> LabeledGraph:
    """Path tree of chain_graph rooted at A."""
    return build_path_tree(chain_graph, "A")


@pytest.fixture
def star_graph() -> LabeledGraph:
    """Hub linked to three spokes; spoke S3 also linked to an outer vertex."""
    graph = LabeledGraph()
    for v in ["Hub", "S1", "S2", "S3", "Outer"]:
        graph.insert_vertex(v)
    for spoke in ["S1", "S2", "S3"]:
        graph.insert_undirected("Hub", spoke, {f"Movie {spoke}"})
    graph.insert_undirected("S3", "Outer", {"Sequel"})
    return graph


@pytest.fixture
def sample_appearances() -> list[tuple[str, str]]:
    """Return (actor, movie) pairs for a small cast."""
    return [
        ("Kevin Bacon", "Footloose"),
        ("Lori Singer", "Footloose"),
        ("John Lithgow", "Footloose"),
        ("Kevin Bacon", "Apollo 13"),
        ("Tom Hanks", "Apollo 13"),
        ("Tom Hanks", "Big"),
        ("Elizabeth Perkins", "Big"),
        ("John Lithgow", "Shrek"),
        ("Mike Myers", "Shrek"),
        ("Loner", "Solo Show"),
    ]


@pytest.fixture
def sample_tables() -> tuple[dict[str, str], dict[str, str], list[tuple[str, str]]]:
    """Return (actors, movies, credits) id tables."""
    actors = {"1": "Kevin Bacon", "2": "Alice", "3": "Bob", "4": "Charlie"}
    movies = {"10": "Footloose", "20": "Tremors"}
    credits = [("10", "1"), ("10", "2"), ("20", "2"), ("20", "3"), ("10", "3")]
    return actors, movies, credits
