# Ensure project root is on sys.path for tests
import sys, pathlib, random
import pytest
root = pathlib.Path(__file__).resolve().parent
if str(root) not in sys.path:
    sys.path.insert(0, str(root))


class ScriptedRng(random.Random):
    """Random source whose random()/randint() results can be queued up front.

    Anything not queued (choice, or an exhausted queue) falls back to the seeded generator.
    """
    def __init__(self, randoms=(), ints=(), seed=1234):
        super().__init__(seed)
        self.randoms = list(randoms)
        self.ints = list(ints)

    def getrandbits(self, k):
        return super().getrandbits(k)

    def random(self):
        if self.randoms:
            return self.randoms.pop(0)
        return super().random()

    def randint(self, a, b):
        if self.ints:
            v = self.ints.pop(0)
            assert a <= v <= b, f"scripted {v} outside [{a}, {b}]"
            return v
        return super().randint(a, b)


@pytest.fixture
def scripted_rng():
    return ScriptedRng


@pytest.fixture
def build_game():
    """Build a controller with a chosen starter and hand-placed wild creatures."""
    from palmon.battle.models import CreatureInstance, Position
    from palmon.data.catalog import get_template
    from palmon.game.controller import GameController
    from palmon.game.session import GameSession

    def _build(starter="Sproutling", wilds=(), rng=None, mode="world"):
        session = GameSession()
        session.roster.add(CreatureInstance.from_template(get_template(starter), session.roster.next_id()))
        for i, spec in enumerate(wilds):
            name, (x, y) = spec[0], spec[1]
            wild = CreatureInstance.from_template(get_template(name), f"wild-{i}", wild=True, position=Position(x, y))
            if len(spec) > 2:
                wild.set_hp(spec[2])
            session.world.add(wild)
        session.mode = mode
        return GameController(session, rng=rng or ScriptedRng())
    return _build
