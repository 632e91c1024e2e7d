"""
Builds the actor collaboration graph from already-loaded association data.

Usage:
    from bacon.data import build_from_tables

    graph = build_from_tables(
        actors={"1": "Kevin Bacon", "2": "Alice"},
        movies={"10": "Footloose"},
        credits=[("10", "1"), ("10", "2")],
    )
    graph.get_label("Alice", "Kevin Bacon")  # {"Footloose"}
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Hashable, Iterable, Mapping

from bacon.graph.labeled import LabeledGraph

logger = logging.getLogger(__name__)

CollaborationGraph = LabeledGraph[str, set[str]]


def resolve_credits(
    actors: Mapping[Hashable, str],
    movies: Mapping[Hashable, str],
    credits: Iterable[tuple[Hashable, Hashable]],
) -> list[tuple[str, str]]:
    """
    Join id tables with credit rows into (actor, movie) pairs.

    Args:
        actors: Actor id -> actor name
        movies: Movie id -> movie title
        credits: (movie_id, actor_id) rows

    Returns:
        (actor name, movie title) pairs; credits with an unknown id are skipped
    """
    pairs = []
    skipped = 0
    for movie_id, actor_id in credits:
        actor = actors.get(actor_id)
        movie = movies.get(movie_id)
        if actor is None or movie is None:
            logger.warning(f"Skipping credit with unknown id: movie={movie_id!r}, actor={actor_id!r}")
            skipped += 1
            continue
        pairs.append((actor, movie))

    if skipped:
        logger.warning(f"Skipped {skipped:,} credits with unknown ids")
    return pairs


def build_collaboration_graph(appearances: Iterable[tuple[str, str]]) -> CollaborationGraph:
    """
    Link every pair of actors who appeared in the same movie.

    Each edge label is the set of movies the two actors share. Both
    directions of an edge hold the same set, so titles are added through
    either endpoint.

    Args:
        appearances: (actor, movie) pairs

    Returns:
        Graph with one vertex per actor
    """
    graph: CollaborationGraph = LabeledGraph()
    casts: dict[str, set[str]] = defaultdict(set)

    for actor, movie in appearances:
        graph.insert_vertex(actor)
        casts[movie].add(actor)

    for movie, cast in casts.items():
        for actor in cast:
            for costar in cast:
                if actor == costar:
                    continue
                if not graph.has_edge(actor, costar):
                    graph.insert_undirected(actor, costar, set())
                graph.get_label(actor, costar).add(movie)

    logger.info(
        f"Built collaboration graph: {graph.num_vertices():,} actors, "
        f"{graph.num_edges() // 2:,} collaborations across {len(casts):,} movies"
    )
    return graph


def build_from_tables(
    actors: Mapping[Hashable, str],
    movies: Mapping[Hashable, str],
    credits: Iterable[tuple[Hashable, Hashable]],
) -> CollaborationGraph:
    """Resolve credit rows against the id tables and build the graph."""
    return build_collaboration_graph(resolve_credits(actors, movies, credits))
