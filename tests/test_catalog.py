from mazeforge.maze import LEVEL_DEFS, Profile, get_level_config, level_configs
from mazeforge.maze.catalog import BASE_LEVEL_DEFS, EXTRA_LEVEL_DEFS


def test_catalog_has_29_levels_with_sequential_ids():
    assert len(BASE_LEVEL_DEFS) == 9
    assert len(EXTRA_LEVEL_DEFS) == 20
    assert [d["id"] for d in LEVEL_DEFS] == list(range(1, 30))
    assert EXTRA_LEVEL_DEFS[0]["id"] == 10
    assert EXTRA_LEVEL_DEFS[0]["name"] == "Easy IV - Azure Atrium"


def test_every_definition_validates():
    configs = level_configs()
    assert len(configs) == 29
    assert {c.difficulty for c in configs} == {"Easy", "Medium", "Hard"}
    assert {c.size for c in configs} == {400, 600, 900}


def test_level_one_definition():
    cfg = get_level_config(1)
    assert cfg.name == "Easy I - Ember Keep"
    assert (cfg.size, cfg.seed, cfg.loop_count) == (400, 1401, 22)
    assert (cfg.min_path_length, cfg.min_turns) == (62, 9)
    assert (cfg.bias_x, cfg.bias_y, cfg.straightness) == (1.2, 1.08, 1.1)
    assert cfg.profiles == (Profile.CITADEL,)


def test_multi_profile_templates_keep_order():
    assert get_level_config(13).profiles == (Profile.CITADEL, Profile.CRYPT)
    assert get_level_config(23).name == "Medium X - Celestial Trench"
    assert get_level_config(23).profiles == (Profile.RINGS, Profile.SERPENT, Profile.CRYPT)
    last = get_level_config(29)
    assert last.name == "Hard IX - Final Rune Circuit"
    assert last.profiles == (Profile.FORTRESS, Profile.RINGS, Profile.SERPENT)


def test_unknown_level_id():
    assert get_level_config(0) is None
    assert get_level_config(30) is None


def test_level_configs_returns_a_copy():
    first = level_configs()
    first.clear()
    assert len(level_configs()) == 29


def test_grid_sizes_follow_board_sizes():
    sizes = {c.size: c.grid_cells for c in level_configs()}
    assert sizes == {400: 19, 600: 29, 900: 45}
