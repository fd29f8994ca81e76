from dataclasses import replace
from threading import Thread

import pytest

from games_api.domain.errors import DuplicateGameError, GameNotFoundError
from games_api.infrastructure.persistence.memory_game_repository import (
    InMemoryGameRepository,
)


@pytest.mark.parametrize(
    "offset, limit, expected",
    [
        (0, None, [1, 2]),
        (1, 5, [2]),
        (0, 1, [1]),
        (0, 0, []),
        (2, None, []),
        (5, 5, []),
    ],
)
def test_list_slices_in_store_order(repository, offset, limit, expected):
    assert [game.id for game in repository.list(offset=offset, limit=limit)] == expected


def test_list_returns_a_copy(repository):
    listed = repository.list()
    listed.clear()
    assert repository.count() == 2


def test_add_appends_at_the_end(repository, mocked_games):
    new_game = replace(mocked_games[0], id=3)
    repository.add(new_game)
    assert [game.id for game in repository.list()] == [1, 2, 3]


def test_add_rejects_duplicate_id(repository, mocked_games):
    with pytest.raises(DuplicateGameError) as excinfo:
        repository.add(replace(mocked_games[1], title="Other"))
    assert excinfo.value.game_id == 2
    assert repository.count() == 2
    assert repository.list()[1].title == "Decent game"


def test_replace_swaps_whole_record(repository, mocked_games):
    repository.replace(1, replace(mocked_games[0], id=7, title="Renamed"))
    first = repository.list()[0]
    assert (first.id, first.title) == (7, "Renamed")


def test_replace_unknown_id_raises(repository, mocked_games):
    with pytest.raises(GameNotFoundError):
        repository.replace(42, mocked_games[0])
    assert [game.id for game in repository.list()] == [1, 2]


def test_remove_drops_every_match(mocked_games):
    repository = InMemoryGameRepository(mocked_games + [replace(mocked_games[0], title="Twin")])
    assert repository.remove(1) == 2
    assert [game.id for game in repository.list()] == [2]


def test_remove_unknown_id_returns_zero(repository):
    assert repository.remove(42) == 0
    assert repository.count() == 2


def test_concurrent_adds_keep_ids_unique(repository, mocked_games):
    failures = []

    def worker(game_id):
        try:
            repository.add(replace(mocked_games[0], id=game_id))
        except DuplicateGameError:
            failures.append(game_id)

    threads = [Thread(target=worker, args=(100 + i % 10,)) for i in range(50)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert repository.count() == 12
    assert len(failures) == 40
