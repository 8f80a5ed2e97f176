"""Game world: two players, a dividing wall and creatures crossing the arena."""

from __future__ import annotations

import enum
import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from doubledodge.consts import CREATURE_COLORS, PLAYER_COLOR, TIME_STEP, Color
from doubledodge.scoreboard import Scoreboard

PLAYER_SPEED = 500.0
PLAYER_SIZE = 50.0
CREATURE_SIZE = 25.0
CREATURE_SPEED = 1.05
WALL_SIZE = (5.0, 800.0)
SPAWN_DIVISOR = 1.4

PLAYER1_KEYS = ("a", "d", "w", "s")
PLAYER2_KEYS = ("left", "right", "up", "down")
PLAYER1_LIMITS = (550.0, 350.0)
PLAYER2_LIMITS = (550.0, 450.0)


class GameState(enum.Enum):
    """The screens the game moves between."""

    MENU = "menu"
    IN_GAME = "in_game"
    GAME_OVER = "game_over"


class Direction(enum.Enum):
    """The way a creature travels."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


class ColliderKind(enum.Enum):
    """What a body is when something runs into it."""

    CREATURE = "creature"
    PLAYER = "player"
    WALL = "wall"


class CreatureType(enum.Enum):
    """Kinds of creature a player can carry."""

    BLUE = 0
    GREEN = 1
    BROWN = 2


def creature_type_from_index(value: int) -> CreatureType:
    """Look up a creature type by its number, raising ValueError if unknown."""
    try:
        return CreatureType(value)
    except ValueError:
        raise ValueError(f"no creature type with index {value!r}") from None


def collide(
    a_pos: tuple[float, float],
    a_size: tuple[float, float],
    b_pos: tuple[float, float],
    b_size: tuple[float, float],
) -> bool:
    """Whether two centred, axis-aligned boxes overlap; touching edges do not."""
    (ax, ay), (aw, ah) = a_pos, a_size
    (bx, by), (bw, bh) = b_pos, b_size
    return (
        ax - aw / 2 < bx + bw / 2
        and ax + aw / 2 > bx - bw / 2
        and ay - ah / 2 < by + bh / 2
        and ay + ah / 2 > by - bh / 2
    )


def spawn_position(
    direction: Direction, flip: float, width: float, height: float
) -> tuple[float, float]:
    """Where a creature heading in ``direction`` enters, ``flip`` in [-1, 1)."""
    across_width = width / SPAWN_DIVISOR
    across_height = height / SPAWN_DIVISOR
    if direction is Direction.UP:
        return flip * across_width, -across_height
    if direction is Direction.DOWN:
        return flip * across_width, across_height
    if direction is Direction.LEFT:
        return across_height, flip * across_height
    return -across_height, flip * across_width


@dataclass
class Body:
    """A coloured box centred at (x, y) in world coordinates."""

    x: float
    y: float
    width: float
    height: float
    color: Color
    kind: ColliderKind

    @property
    def position(self) -> tuple[float, float]:
        return (self.x, self.y)

    @property
    def size(self) -> tuple[float, float]:
        return (self.width, self.height)


@dataclass
class Player:
    """A box steered by four keys and kept inside its limits."""

    body: Body
    keys: tuple[str, str, str, str]
    limits: tuple[float, float]
    speed: float = PLAYER_SPEED
    item_type: CreatureType = CreatureType.BLUE

    def move(self, pressed: Iterable[str]) -> None:
        """Step one frame for the set of key names held down."""
        held = set(pressed)
        left, right, up, down = self.keys
        step = self.speed * TIME_STEP
        # The direction accumulates over all four keys, horizontal and vertical alike.
        direction = 0.0
        if left in held:
            direction -= 1.0
            self.body.x += direction * step
        if right in held:
            direction += 1.0
            self.body.x += direction * step
        if up in held:
            direction += 1.0
            self.body.y += direction * step
        if down in held:
            direction -= 1.0
            self.body.y += direction * step
        x_limit, y_limit = self.limits
        self.body.x = max(min(self.body.x, x_limit), -x_limit)
        self.body.y = max(min(self.body.y, y_limit), -y_limit)


@dataclass
class Creature:
    """A box drifting in a fixed direction."""

    body: Body
    direction: Direction

    def advance(self) -> None:
        """Move one frame along the creature's direction."""
        if self.direction is Direction.UP:
            self.body.y += CREATURE_SPEED
        elif self.direction is Direction.DOWN:
            self.body.y -= CREATURE_SPEED
        elif self.direction is Direction.LEFT:
            self.body.x -= CREATURE_SPEED
        else:
            self.body.x += CREATURE_SPEED


def _make_wall() -> Body:
    width, height = WALL_SIZE
    return Body(0.0, 0.0, width, height, PLAYER_COLOR[1], ColliderKind.WALL)


def _make_player(x: float, color: Color, keys, limits) -> Player:
    body = Body(x, -215.0, PLAYER_SIZE, PLAYER_SIZE, color, ColliderKind.PLAYER)
    return Player(body=body, keys=keys, limits=limits)


@dataclass
class Game:
    """The state of one session: screen, bodies and score."""

    width: float
    height: float
    rng: random.Random = field(default_factory=random.Random)
    state: GameState = GameState.MENU
    scoreboard: Scoreboard = field(default_factory=Scoreboard)
    players: list[Player] = field(default_factory=list)
    walls: list[Body] = field(default_factory=list)
    creatures: list[Creature] = field(default_factory=list)

    def __init__(self, width: float, height: float, rng: random.Random | None = None):
        self.width = width
        self.height = height
        self.rng = rng if rng is not None else random.Random()
        self.state = GameState.MENU
        self.scoreboard = Scoreboard()
        self.players = []
        self.walls = []
        self.creatures = []

    def play(self) -> None:
        """Enter a new round from the menu or the game-over screen."""
        if self.state is GameState.IN_GAME:
            raise RuntimeError("the game is already running")
        self.state = GameState.IN_GAME
        self.start()

    def start(self) -> None:
        """Clear the arena and place the wall and both players."""
        self.teardown()
        self.walls.append(_make_wall())
        self.players.append(
            _make_player(-215.0, PLAYER_COLOR[0], PLAYER1_KEYS, PLAYER1_LIMITS)
        )
        self.players.append(
            _make_player(215.0, PLAYER_COLOR[2], PLAYER2_KEYS, PLAYER2_LIMITS)
        )

    def teardown(self) -> None:
        """Reset the score and remove every body."""
        self.scoreboard.reset()
        self.players.clear()
        self.walls.clear()
        self.creatures.clear()

    def bodies(self) -> Iterator[Body]:
        """Every body in the arena."""
        yield from self.walls
        for player in self.players:
            yield player.body
        for creature in self.creatures:
            yield creature.body

    def spawn_creature(self) -> Creature | None:
        """Add a creature at a random edge while a round is running."""
        if self.state is not GameState.IN_GAME:
            return None
        color = self.rng.choice(CREATURE_COLORS)
        flip = self.rng.random() * 2.0 - 1.0
        direction = self.rng.choice(list(Direction))
        x, y = spawn_position(direction, flip, self.width, self.height)
        body = Body(x, y, CREATURE_SIZE, CREATURE_SIZE, color, ColliderKind.CREATURE)
        creature = Creature(body=body, direction=direction)
        self.creatures.append(creature)
        return creature

    def move_creatures(self) -> None:
        """Advance every creature by one frame."""
        for creature in self.creatures:
            creature.advance()

    def move_players(self, pressed: Iterable[str]) -> None:
        """Move both players for the keys held down."""
        held = set(pressed)
        for player in self.players:
            player.move(held)

    def check_collisions(self) -> bool:
        """End the round if a player touches a creature or the wall."""
        for player in self.players:
            for body in self.bodies():
                if body.kind is ColliderKind.PLAYER:
                    continue
                if not collide(player.body.position, player.body.size, body.position, body.size):
                    continue
                if self.state is GameState.IN_GAME:
                    self.state = GameState.GAME_OVER
        return self.state is GameState.GAME_OVER

    def update(self, pressed: Iterable[str]) -> None:
        """Run one frame of play; nothing happens outside a round."""
        if self.state is not GameState.IN_GAME:
            return
        self.move_players(pressed)
        self.move_creatures()
        self.check_collisions()

    def tick_score(self) -> None:
        """Award a point for surviving while a round is running."""
        if self.state is GameState.IN_GAME:
            self.scoreboard.tick()