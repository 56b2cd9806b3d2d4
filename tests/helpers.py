"""Shared helpers for feeding throws into the engine."""


def bowl(game, throws):
    """Feed a sequence of settled counts and collect every event produced."""
    events = []
    for pins in throws:
        events.extend(game.on_throw_settled(pins))
    return events


def roll_all(player, throws):
    """Apply throws straight to a Player the way the engine does."""
    for pins in throws:
        frame = player.frame
        frame.add_throw(pins)
        if frame.is_complete() and player.current_frame < 9:
            player.current_frame += 1
        player.calculate_scores()


def random_game(rng):
    """A full, valid single-game throw sequence drawn from rng."""
    throws = []
    for _ in range(9):
        first = rng.randint(0, 10)
        if first == 10:
            throws.append(10)
        else:
            throws.extend([first, rng.randint(0, 10 - first)])

    first = rng.randint(0, 10)
    if first == 10:
        throws.extend([10, rng.randint(0, 10), rng.randint(0, 10)])
    else:
        second = rng.randint(0, 10 - first)
        throws.extend([first, second])
        if first + second == 10:
            throws.append(rng.randint(0, 10))
    return throws
