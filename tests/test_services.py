from dataclasses import replace

import pytest

from games_api.application.list_options import ListOptions
from games_api.application.services.create_game_service import CreateGameService
from games_api.application.services.delete_game_service import DeleteGameService
from games_api.application.services.list_games_service import ListGamesService
from games_api.application.services.update_game_service import UpdateGameService
from games_api.domain.errors import DuplicateGameError, GameNotFoundError


def test_list_games_applies_options(repository):
    games = ListGamesService(repository).execute(ListOptions(offset=1, limit=1))
    assert [game.id for game in games] == [2]


def test_create_game_propagates_duplicate(repository, mocked_games):
    with pytest.raises(DuplicateGameError):
        CreateGameService(repository).execute(mocked_games[0])
    assert repository.count() == 2


def test_update_game_uses_path_id_for_lookup(repository, mocked_games):
    updated = replace(mocked_games[0], id=9, title="Moved")
    UpdateGameService(repository).execute(1, updated)
    assert [game.id for game in repository.list()] == [9, 2]


def test_update_unknown_game_raises(repository, mocked_games):
    with pytest.raises(GameNotFoundError):
        UpdateGameService(repository).execute(42, mocked_games[0])


def test_delete_game_removes_record(repository):
    DeleteGameService(repository).execute(2)
    assert [game.id for game in repository.list()] == [1]


def test_delete_unknown_game_raises(repository):
    with pytest.raises(GameNotFoundError) as excinfo:
        DeleteGameService(repository).execute(42)
    assert excinfo.value.game_id == 42
    assert repository.count() == 2
