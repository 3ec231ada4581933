"""Round-robin turn engine for multi-player salvo games."""

import logging
import random
from collections.abc import Mapping
from enum import Enum

from salvo.errors import InvalidConfiguration, NoWinner
from salvo.player import Player

logger = logging.getLogger(__name__)


class GameState(Enum):
    SETUP = "setup"
    RUNNING = "running"
    FINISHED = "finished"


class Game:
    """
    A game between two or more players.

    Players keep the order they joined in; that order is the turn order for
    every round. With no players given, a default two-player game is set up.
    """

    def __init__(self, *players, rng=None):
        self.rng = rng or random.Random()
        self.players = []
        self.state = GameState.SETUP
        self.winner = None
        self.rounds = 0
        self.strikes = 0

        for player in players or (None, None):
            self.add_player(player)

    # ------------------------------------------------------------------ #
    # Setup
    # ------------------------------------------------------------------ #
    def _next_id(self):
        """Least whole number not already used as a player id."""
        taken = {player.id for player in self.players}
        n = 1
        while n in taken:
            n += 1
        return n

    def add_player(self, player=None, number=None):
        """
        Add a player to the game and hand it back.

        ``player`` may be omitted, a name, a Player or a mapping of player
        attributes (name, fleet, dimensions, id). ``number`` fixes the
        player id; otherwise the least unused id is taken.
        """
        if self.state is not GameState.SETUP:
            raise InvalidConfiguration("Players cannot join a game that has already started.")

        if isinstance(player, Player):
            new_player = player
        else:
            i = number if number is not None else self._next_id()
            if isinstance(player, Mapping):
                new_player = Player.from_spec(player, id=i, rng=self.rng)
            else:
                new_player = Player(i, name=player or None, rng=self.rng)

        if number is not None and new_player.id != number:
            raise InvalidConfiguration(
                f"Player number {number} does not match {new_player.name}'s id {new_player.id}."
            )
        if any(existing.id == new_player.id for existing in self.players):
            raise InvalidConfiguration(f"A player number {new_player.id} already exists.")

        self.players.append(new_player)
        logger.debug(f"{new_player.name} joined as player {new_player.id}")
        return new_player

    # ------------------------------------------------------------------ #
    # Lookup
    # ------------------------------------------------------------------ #
    def player(self, key):
        """Find a player by id, by ``player_<id>`` key or by name. Returns None if absent."""
        for player in self.players:
            if key == player.id or key == player.key or key == player.name or str(key) == str(player.id):
                return player
        logger.warning(f"No such player '{key}'")
        return None

    def alive_players(self):
        return [player for player in self.players if player.is_alive()]

    def is_over(self):
        return self.state is GameState.FINISHED

    # ------------------------------------------------------------------ #
    # Play
    # ------------------------------------------------------------------ #
    def _random_coordinate(self, defender):
        width, height = defender.dimensions
        return self.rng.randint(1, width), self.rng.randint(1, height)

    def _fire(self, attacker, defender):
        """Strike ``defender`` at random coordinates until one is not a duplicate."""
        while True:
            result = attacker.strike(defender, *self._random_coordinate(defender))
            if not result.is_duplicate:
                self.strikes += 1
                return result

    def play_round(self):
        """Every live player strikes every other live player once, in join order."""
        self.rounds += 1
        for attacker in self.players:
            if not attacker.is_alive():
                continue
            for defender in self.players:
                if defender is attacker or not defender.is_alive():
                    continue
                self._fire(attacker, defender)

    def play(self):
        """Run rounds until one player is left alive and return that player."""
        if self.is_over():
            return self.winner
        if len(self.players) < 2:
            raise InvalidConfiguration("A game needs at least two players.")

        self.state = GameState.RUNNING
        while True:
            self.play_round()
            alive = self.alive_players()
            if len(alive) == 1:
                break
            if not alive:
                raise NoWinner(f"Every player was eliminated after round {self.rounds}.")

        self.winner = alive[0]
        self.state = GameState.FINISHED
        logger.info(f"{self.winner.name} is the winner!")
        return self.winner
