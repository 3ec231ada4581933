"""Plain-text rendering of salvo grids for terminal hosts."""


def grid_text(grid):
    """Return the grid as a "flush-left" text matrix, one row per line."""
    return "\n".join(" ".join(row) for row in grid.rows())


def player_view(player, opponent=None):
    """
    A player's home grid, or their shots at ``opponent`` when one is given.
    An opponent never fired at shows up as an all-blank grid.
    """
    if opponent is None:
        return grid_text(player.home_grid)
    tracking = player.tracking_grid(opponent)
    if tracking is None:
        width, height = opponent.dimensions
        return "\n".join(" ".join("." * width) for _ in range(height))
    return grid_text(tracking)


def scoreboard(players):
    """One line per player: name, life left and hits scored."""
    width = max((len(player.name) for player in players), default=0)
    return "\n".join(
        f"{player.name:<{width}}  life {player.life:>3}  score {player.score:>3}"
        for player in players
    )
