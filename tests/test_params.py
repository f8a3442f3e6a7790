import pytest

from agentskills_config import McpServerSpec, ParameterSpec, ScriptedPrompter, SetupCancelledError
from agentskills_config.params import apply_params, resolve_parameters, substitute


def _spec(**parameters: ParameterSpec) -> McpServerSpec:
    return McpServerSpec(
        name="github",
        command="npx",
        args=["-y", "github-mcp", "--repo", "{{REPO}}"],
        env={"GITHUB_TOKEN": "{{TOKEN}}"},
        parameters=parameters,
    )


# --- resolve_parameters ---

def test_env_default_resolved_from_environ():
    spec = _spec(TOKEN=ParameterSpec(required=True, default="{{ENV:GH_TOKEN}}"))
    prompter = ScriptedPrompter()
    params = resolve_parameters(spec, prompter, environ={"GH_TOKEN": "secret"})
    assert params == {"TOKEN": "secret"}
    assert prompter.calls == []


def test_unset_env_default_counts_as_no_default():
    spec = _spec(
        TOKEN=ParameterSpec(
            description="GitHub token", required=True, default="{{ENV:GH_TOKEN}}", sensitive=True
        )
    )
    prompter = ScriptedPrompter(["typed"])
    params = resolve_parameters(spec, prompter, environ={})
    assert params == {"TOKEN": "typed"}
    assert len(prompter.calls) == 1
    assert prompter.calls[0].sensitive is True
    assert prompter.calls[0].description == "GitHub token"
    assert "TOKEN" in prompter.calls[0].message


def test_literal_default_used_without_prompt():
    spec = _spec(REPO=ParameterSpec(required=True, default="octo/repo"))
    prompter = ScriptedPrompter()
    assert resolve_parameters(spec, prompter, environ={}) == {"REPO": "octo/repo"}
    assert prompter.calls == []


def test_optional_without_default_is_omitted():
    spec = _spec(REPO=ParameterSpec(required=False))
    prompter = ScriptedPrompter()
    assert resolve_parameters(spec, prompter, environ={}) == {}
    assert prompter.calls == []


def test_cancelled_prompt_raises_setup_cancelled():
    spec = _spec(TOKEN=ParameterSpec(required=True))
    with pytest.raises(SetupCancelledError):
        resolve_parameters(spec, ScriptedPrompter([None]), environ={})


def test_no_parameters_resolves_to_empty():
    spec = McpServerSpec(name="fs", command="mcp-fs")
    assert resolve_parameters(spec, ScriptedPrompter(), environ={}) == {}


# --- apply_params ---

def test_apply_params_substitutes_args_and_env():
    entry = apply_params(_spec(), {"REPO": "octo/repo", "TOKEN": "t0k"})
    assert entry.command == "npx"
    assert entry.args == ["-y", "github-mcp", "--repo", "octo/repo"]
    assert entry.env == {"GITHUB_TOKEN": "t0k"}


def test_apply_params_substitutes_command():
    spec = McpServerSpec(name="x", command="{{BIN}}", parameters={"BIN": ParameterSpec()})
    assert apply_params(spec, {"BIN": "/usr/bin/x"}).command == "/usr/bin/x"


def test_apply_params_leaves_unresolved_tokens():
    entry = apply_params(_spec(), {"REPO": "octo/repo"})
    assert entry.env == {"GITHUB_TOKEN": "{{TOKEN}}"}


def test_apply_params_is_idempotent():
    params = {"REPO": "octo/repo", "TOKEN": "t0k"}
    once = apply_params(_spec(), params)
    rendered = McpServerSpec(name="github", command=once.command, args=once.args, env=once.env)
    twice = apply_params(rendered, params)
    assert twice.model_dump() == once.model_dump()


def test_apply_params_omits_empty_args_and_env():
    entry = apply_params(McpServerSpec(name="fs", command="mcp-fs"), {})
    assert entry.model_dump(exclude_unset=True) == {"command": "mcp-fs"}


def test_apply_params_copies_cwd():
    spec = McpServerSpec(name="fs", command="mcp-fs", cwd="/srv")
    assert apply_params(spec, {}).cwd == "/srv"


def test_substitute_ignores_env_sentinel():
    assert substitute("{{ENV:HOME}}", {"HOME": "x"}) == "{{ENV:HOME}}"
