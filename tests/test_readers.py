import logging
from env_schema import FieldDefinition, SchemaFlag, read_argv, read_env, split_opts

def field(name, *flags):
    return FieldDefinition(name=name, flags=frozenset(flags))

class TestSplitOpts:
    def test_splits_delimited_options(self):
        assert split_opts(["--foo=bar", "baz"]) == ["--foo", "bar", "baz"]

    def test_empty_value(self):
        assert split_opts(["--foo="]) == ["--foo", ""]

    def test_splits_on_first_equals(self):
        assert split_opts(["--foo=a=b"]) == ["--foo", "a=b"]

    def test_leaves_other_tokens(self):
        argv = ["node", "--flag", "-x=1", "key=value"]
        assert split_opts(argv) == argv

    def test_does_not_mutate_input(self):
        argv = ["--foo=bar"]
        split_opts(argv)
        assert argv == ["--foo=bar"]

class TestReadEnv:
    def test_flag_combinations(self):
        defs = [
            field("plain"),
            field("switch", SchemaFlag.FLAG),
            field("list", SchemaFlag.MULTI),
            field("count", SchemaFlag.FLAG, SchemaFlag.MULTI),
            field("needed", SchemaFlag.REQUIRED),
        ]
        env = {"PLAIN": "a", "SWITCH": "on", "LIST": "b", "COUNT": "", "NEEDED": ""}
        config = {}

        read_env(defs, env, config)

        assert config == {"plain": "a", "switch": True, "list": ["b"], "count": 0, "needed": ""}

    def test_missing_variable_keeps_existing_value(self):
        config = {"plain": "init"}
        read_env([field("plain")], {"OTHER": "x"}, config)
        assert config == {"plain": "init"}

    def test_prompt_is_ignored(self):
        config = {}
        read_env([field("plain", SchemaFlag.PROMPT)], {"PLAIN": "x"}, config)
        assert config["plain"] == "x"

class TestReadArgv:
    def test_returns_and_stores_leftovers(self):
        config = {}
        leftover = read_argv([field("simple value")], ["node", "script.js", "--simple-value", "foo", "extra"], config)

        assert leftover == ["node", "script.js", "extra"]
        assert config["argv"] == leftover
        assert config["simple value"] == "foo"

    def test_last_value_wins(self):
        config = {}
        read_argv([field("plain")], ["--plain=a", "--plain", "b"], config)
        assert config["plain"] == "b"
        assert config["argv"] == []

    def test_does_not_mutate_input(self):
        argv = ["--plain", "a", "rest"]
        read_argv([field("plain")], argv, {})
        assert argv == ["--plain", "a", "rest"]

    def test_earlier_fields_claim_tokens_first(self):
        config = {}
        defs = [field("first"), field("second")]
        read_argv(defs, ["--first", "--second", "--second", "x"], config)

        assert config["first"] == "--second"
        assert config["second"] == "x"
        assert config["argv"] == []

    def test_multi_appends_to_existing_list(self):
        config = {"list": ["env"]}
        read_argv([field("list", SchemaFlag.MULTI)], ["--list", "a", "--list=b"], config)
        assert config["list"] == ["env", "a", "b"]

    def test_counter_resets_before_counting(self):
        config = {"count": 5}
        read_argv([field("count", SchemaFlag.FLAG, SchemaFlag.MULTI)], ["--count", "x", "--count"], config)
        assert config["count"] == 2
        assert config["argv"] == ["x"]

    def test_counter_untouched_when_absent(self):
        config = {"count": 1}
        read_argv([field("count", SchemaFlag.FLAG, SchemaFlag.MULTI)], [], config)
        assert config["count"] == 1

    def test_flag_consumes_only_itself(self):
        config = {}
        read_argv([field("switch", SchemaFlag.FLAG)], ["--switch", "value"], config)
        assert config["switch"] is True
        assert config["argv"] == ["value"]

    def test_required_multi_defaults_to_empty_list(self):
        config = {}
        read_argv([field("list", SchemaFlag.MULTI, SchemaFlag.REQUIRED)], [], config)
        assert config["list"] == []

    def test_required_multi_keeps_env_value_when_absent(self):
        config = {"list": ["env"]}
        read_argv([field("list", SchemaFlag.MULTI, SchemaFlag.REQUIRED)], [], config)
        assert config["list"] == ["env"]

    def test_required_multi_options_replace_env_value(self):
        config = {"list": ["env"]}
        read_argv([field("list", SchemaFlag.MULTI, SchemaFlag.REQUIRED)], ["--list=a"], config)
        assert config["list"] == ["a"]

    def test_trailing_option_unsets_value(self, caplog):
        config = {"plain": "env"}
        with caplog.at_level(logging.WARNING, logger="env_schema"):
            read_argv([field("plain")], ["rest", "--plain"], config)

        assert config["plain"] is None
        assert config["argv"] == ["rest"]
        assert "--plain" in caplog.text

    def test_trailing_multi_option_appends_none(self):
        config = {"list": ["env"]}
        read_argv([field("list", SchemaFlag.MULTI)], ["--list", "a", "--list"], config)

        assert config["list"] == ["env", "a", None]
        assert config["argv"] == []
