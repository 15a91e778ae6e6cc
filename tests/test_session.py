import math
import random

import pytest

from conftest import STEP, advance
from systems.session import Controls, GameSession, SessionState

NO_TRAFFIC = 1e9


def quiet(session):
    """Start a session with spawning pushed out of reach."""
    session.start()
    session.traffic.spawn_interval = NO_TRAFFIC
    return session


class RecordingSink:
    def __init__(self):
        self.calls = []

    def draw_road_frame(self, road):
        self.calls.append(("road", road))

    def draw_vehicle(self, car):
        self.calls.append(("car", car))

    def draw_particle_effect(self, effect):
        self.calls.append(("effect", effect))


class FakeInput:
    def __init__(self, steering=0.0, brake=False, accelerate=False):
        self.steering = steering
        self.brake_active = brake
        self.accelerate_active = accelerate

    def steering_input(self):
        return self.steering


def test_idle_session_does_not_simulate(session):
    assert session.state is SessionState.IDLE
    assert not session.game_active
    assert not session.game_over
    advance(session, 1.0)
    assert session.distance == 0.0
    assert session.enemies == []


def test_first_enemy_after_one_and_a_half_seconds(session):
    session.start()
    advance(session, 1.5 - STEP)
    assert session.enemies == []

    advance(session, STEP)
    assert len(session.enemies) == 1
    enemy = session.enemies[0]
    centers = [session.road.lane_center(i) for i in range(3)]
    assert enemy.x in centers
    assert enemy.y + enemy.height / 2 < 0


def test_one_difficulty_step_after_ten_seconds(session):
    quiet(session)
    advance(session, 10.0 - STEP)
    assert session.max_speed == 300.0

    advance(session, STEP)
    assert session.max_speed == 310.0
    assert session.player.max_speed == 310.0

    advance(session, 5.0)
    assert session.max_speed == 310.0


@pytest.mark.parametrize("step", [0.1, 1.0 / 60.0, 0.05, 1.0 / 30.0])
def test_difficulty_step_lands_on_time_at_common_frame_rates(session, step):
    quiet(session)
    ticks = int(round(10.0 / step))
    for _ in range(ticks - 1):
        session.update(step)
    assert session.max_speed == 300.0

    session.update(step)
    assert session.max_speed == 310.0
    assert session.player.max_speed == 310.0
    assert session.traffic.difficulty_level == 1


@pytest.mark.parametrize("step", [1.0 / 60.0, 0.1, 1.0 / 30.0])
def test_first_enemy_lands_on_time_at_common_frame_rates(session, step):
    session.start()
    ticks = int(round(1.5 / step))
    for _ in range(ticks - 1):
        session.update(step)
    assert session.enemies == []

    session.update(step)
    assert len(session.enemies) == 1


def test_player_max_speed_matches_session_from_the_start(session):
    session.start()
    assert session.player.max_speed == session.max_speed == 300.0
    session.player.max_speed = 1.0
    session.restart()
    assert session.player.max_speed == session.max_speed


def test_speed_model(session):
    quiet(session)
    session.update(STEP)
    assert session.speed == pytest.approx(20 * STEP)

    before = session.speed
    session.update(STEP, Controls(accelerate=True))
    assert session.speed == pytest.approx(before + 20 * 1.5 * STEP)

    before = session.speed
    session.update(STEP, Controls(brake=True))
    assert session.speed == pytest.approx(before * 0.95)

    session.speed = 299.9
    session.update(STEP)
    assert session.speed == 300.0


def test_score_follows_distance_and_never_drops(session, events):
    quiet(session)
    rng = random.Random(21)
    last = 0
    for _ in range(400):
        controls = Controls(brake=rng.random() < 0.3, accelerate=rng.random() < 0.5)
        session.update(STEP, controls)
        assert session.score >= last
        assert session.score == math.floor(session.distance / 10)
        last = session.score
    assert session.score > 0
    assert events.scores[-1] == session.score


def test_player_never_leaves_the_road(session):
    quiet(session)
    for steering in (1.0, -1.0):
        for _ in range(100):
            session.update(0.1, Controls(steering=steering))
            assert 25 <= session.player.x <= 455


def crash(session):
    enemy = session.traffic.spawn_enemy()
    enemy.x, enemy.y = session.player.x, session.player.y
    return session.check_collisions()


def test_collision_ends_the_game_once(session, events):
    quiet(session)
    advance(session, 1.0)
    score_before = session.score
    assert score_before > 0

    assert crash(session) is True
    assert session.game_over
    assert not session.game_active
    assert session.state is SessionState.OVER
    assert events.game_overs == [score_before]
    assert len(events.explosions) == 1

    assert session.check_collisions() is False
    advance(session, 2.0, Controls(accelerate=True))
    assert session.score == score_before
    assert events.game_overs == [score_before]
    assert len(events.explosions) == 1


def test_crash_aftermath(session):
    quiet(session)
    advance(session, 2.0)
    crash(session)
    speed = session.speed
    assert len(session.effects) == 2

    session.update(STEP)
    assert session.speed == pytest.approx(speed * 0.95)
    assert session.enemies == []

    # explosion lasts one second, then leaves on the following tick
    advance(session, 1.0 - STEP)
    assert not any(e.active for e in session.effects)
    assert len(session.effects) == 2
    session.update(STEP)
    assert session.effects == []


def test_pause_keeps_state(session):
    quiet(session)
    advance(session, 0.5)
    distance = session.distance

    session.pause()
    assert session.state is SessionState.PAUSED
    assert not session.game_active
    advance(session, 1.0)
    assert session.distance == distance

    session.resume()
    assert session.game_active
    advance(session, 0.5)
    assert session.distance > distance


def test_invalid_transitions_are_ignored(session):
    session.pause()
    assert session.state is SessionState.IDLE
    session.start()
    session.resume()
    assert session.state is SessionState.ACTIVE

    crash(session)
    session.pause()
    assert session.state is SessionState.OVER


def test_restart_resets_everything(session):
    session.start()
    advance(session, 12.0)
    crash(session)
    assert session.game_over

    session.restart()
    assert session.game_active
    assert session.score == 0
    assert session.distance == 0.0
    assert session.speed == 0.0
    assert session.max_speed == 300.0
    assert session.spawn_interval == 1.5
    assert session.enemies == []
    assert session.effects == []
    assert not session.player.collided
    assert session.player.x == 240


def test_tick_uses_capped_frame_time_and_draws_in_order(session):
    quiet(session)
    session.traffic.spawn_enemy()
    sink = RecordingSink()

    assert session.tick(1000, FakeInput(), sink) == 0.0
    assert session.tick(1050, FakeInput(), sink) == pytest.approx(0.05)
    assert session.tick(9000, FakeInput(), sink) == 0.1

    crash(session)
    sink.calls.clear()
    session.draw(sink)
    kinds = [kind for kind, _ in sink.calls]
    assert kinds[0] == "road"
    assert kinds[-2:] == ["effect", "effect"]
    cars = [obj for kind, obj in sink.calls if kind == "car"]
    assert cars[-1] is session.player


def test_paused_tick_only_draws(session):
    quiet(session)
    session.tick(0)
    session.pause()
    sink = RecordingSink()
    assert session.tick(500, FakeInput(), sink) == 0.0
    assert sink.calls
    session.resume()
    # time spent paused is skipped
    assert session.tick(60000) == 0.0


def test_input_is_clamped_when_sampled():
    controls = Controls.sample(FakeInput(steering=3.0, brake=1, accelerate=0))
    assert controls == Controls(steering=1.0, brake=True, accelerate=False)
    assert Controls.sample(None) == Controls()


def test_nan_steering_leaves_the_player_in_place(session):
    quiet(session)
    controls = Controls.sample(FakeInput(steering=float("nan")))
    assert controls.steering == 0.0

    session.update(0.05, controls)
    session.update(0.05, Controls(steering=float("nan")))
    assert session.player.x == 240
    assert math.isfinite(session.player.turn_speed)


def test_nan_frame_time_is_a_no_op(session):
    quiet(session)
    session.update(float("nan"))
    assert session.distance == 0.0
    assert session.speed == 0.0


def test_resize_reanchors_player(session):
    session.start()
    session.player.x = 470
    session.resize(300, 1000)
    assert session.road.lane_width == 100
    assert session.player.y == 800
    assert session.player.track_width == 300
    assert session.player.x == 275

    with pytest.raises(ValueError):
        session.resize(0, 100)
    assert session.width == 300


def test_speed_events(session, events):
    quiet(session)
    advance(session, 0.5)
    assert len(events.speeds) == 8
    assert events.speeds[-1] == (session.speed, session.max_speed)
