import pytest

from pixel_city.simulation import Job, TileMap, Topic, Town
from pixel_city.simulation.conversation import SMALL_TALK


def test_partners_must_be_within_three_tiles_on_both_axes(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    near = town.spawn_agent("Sam", Job.FARMER, x=2, y=2)
    town.spawn_agent("Taylor", Job.FARMER, x=3, y=0)
    town.spawn_agent("Jordan", Job.FARMER, x=0, y=5)

    assert town.conversations.find_partners(speaker, town.agents) == [near]


def test_converse_without_neighbours_is_noop(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    town.spawn_agent("Sam", Job.FARMER, x=8, y=8)
    speaker.status = "Farming"

    assert town.conversations.converse(speaker, town) is None
    assert speaker.status == "Farming"
    assert len(speaker.memory) == 0
    assert len(town.events) == 0


def test_small_talk_when_nothing_else_applies(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)

    assert town.conversations.candidate_topics(speaker, town) == list(SMALL_TALK)


def test_topics_follow_needs_and_economy(grass_map: TileMap) -> None:
    town = Town(rng=None, tile_map=grass_map)
    town.pool.wood = 10
    town.pool.houses = 1
    builder = town.spawn_agent("Bob", Job.BUILDER, x=0, y=0)
    builder.hunger = 60
    builder.energy = 20

    assert town.conversations.candidate_topics(builder, town) == [
        Topic.ASK_FOR_FOOD,
        Topic.ASK_FOR_WOOD,
        Topic.COMPLAIN,
        Topic.DISCUSS_HOUSING,
    ]


def test_converse_logs_memory_and_shows_talking_status(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    listener = town.spawn_agent("Sam", Job.GATHERER, x=1, y=0)
    speaker.status = "Farming"

    topic = town.conversations.converse(speaker, town)

    assert topic in SMALL_TALK
    assert speaker.status == "Talking to Sam"
    record = speaker.last_memory
    assert record.with_whom == "Sam"
    assert record.topic == topic.value
    assert record.day == town.clock.day
    assert record.time == town.clock.time_string
    # Only the speaker is affected
    assert listener.status == "Exploring"
    assert len(listener.memory) == 0


def test_talking_status_reverts_after_delay(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    town.spawn_agent("Sam", Job.GATHERER, x=1, y=0)
    speaker.status = "Farming"
    delay = town.conversation_config.revert_delay_frames

    town.conversations.converse(speaker, town)

    town.events.process(delay - 1)
    assert speaker.status == "Talking to Sam"
    town.events.process(delay)
    assert speaker.status == "Farming"


def test_revert_skipped_when_status_already_changed(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    town.spawn_agent("Sam", Job.GATHERER, x=1, y=0)
    speaker.status = "Farming"

    town.conversations.converse(speaker, town)
    speaker.status = "Hungry"
    town.events.process(town.conversation_config.revert_delay_frames)

    assert speaker.status == "Hungry"


def test_revert_fires_while_paused(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    town.spawn_agent("Sam", Job.GATHERER, x=1, y=0)
    speaker.status = "Farming"

    town.conversations.converse(speaker, town)
    town.toggle_pause()
    for _ in range(town.conversation_config.revert_delay_frames):
        town.step()

    assert speaker.status == "Farming"


def test_ask_for_food_shares_from_pool(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    other = town.spawn_agent("Sam", Job.FARMER, x=1, y=0)
    speaker.hunger = 60
    town.pool.food = 50

    result = town.conversations.resolve(Topic.ASK_FOR_FOOD, speaker, other, town)

    assert result == "Sam shared food. Hunger -15"
    assert town.pool.food == 48
    assert speaker.hunger == pytest.approx(45)


def test_ask_for_food_with_bare_pantry(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    other = town.spawn_agent("Sam", Job.FARMER, x=1, y=0)
    speaker.hunger = 60
    town.pool.food = 4

    result = town.conversations.resolve(Topic.ASK_FOR_FOOD, speaker, other, town)

    assert result == "Sam has no food to share"
    assert town.pool.food == 4
    assert speaker.hunger == 60


def test_shared_food_never_drives_hunger_negative(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    other = town.spawn_agent("Sam", Job.FARMER, x=1, y=0)
    speaker.hunger = 5

    town.conversations.resolve(Topic.ASK_FOR_FOOD, speaker, other, town)

    assert speaker.hunger == 0


def test_complaining_restores_energy(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    other = town.spawn_agent("Sam", Job.FARMER, x=1, y=0)
    speaker.energy = 25

    result = town.conversations.resolve(Topic.COMPLAIN, speaker, other, town)

    assert result == "Felt better after complaining"
    assert speaker.energy == 30


@pytest.mark.parametrize(
    "topic, other_job, wood, expected",
    [
        (Topic.ASK_FOR_WOOD, Job.GATHERER, 25, "Sam will gather more wood"),
        (Topic.ASK_FOR_WOOD, Job.GATHERER, 5, "No wood available"),
        (Topic.DISCUSS_HOUSING, Job.BUILDER, 100, "Discussed new house designs"),
        (Topic.DISCUSS_HOUSING, Job.FARMER, 100, "Talked about living conditions"),
        (Topic.DISCUSS_WEATHER, Job.FARMER, 100, "Discussed the weather"),
        (Topic.GREETING, Job.FARMER, 100, "Said hello"),
    ],
)
def test_flavour_topics(town: Town, topic: Topic, other_job: Job, wood: float, expected: str) -> None:
    speaker = town.spawn_agent("Alex", Job.BUILDER, x=0, y=0)
    other = town.spawn_agent("Sam", other_job, x=1, y=0)
    town.pool.wood = wood

    assert town.conversations.resolve(topic, speaker, other, town) == expected
    assert town.pool.wood == wood


def test_story_comes_from_a_past_day(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    other = town.spawn_agent("Sam", Job.FARMER, x=1, y=0)
    town.clock.day = 4

    for _ in range(20):
        result = town.conversations.resolve(Topic.SHARE_STORY, speaker, other, town)
        day = int(result.removeprefix("Shared a story from day "))
        assert 1 <= day <= 4


def test_conversation_memory_capped(town: Town) -> None:
    speaker = town.spawn_agent("Alex", Job.FARMER, x=0, y=0)
    town.spawn_agent("Sam", Job.FARMER, x=1, y=0)

    for _ in range(8):
        town.conversations.converse(speaker, town)

    assert len(speaker.memory) == 5
