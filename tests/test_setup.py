import json
import sys
from concurrent.futures import ThreadPoolExecutor

import frontmatter
import pytest

from agentskills_config import (
    ScriptedPrompter,
    SetupCancelledError,
    Skill,
    collect_dependencies,
    configure_skill_mcp_deps_for_agents,
    generate_skills_mcp_agent,
    run_setup,
)

GH_SERVER = {
    "name": "gh",
    "command": "gh-mcp",
    "env": {"TOKEN": "{{TOKEN}}"},
    "parameters": {"TOKEN": {"description": "GitHub token", "required": True, "sensitive": True}},
}
FS_SERVER = {"name": "fs", "command": "mcp-fs", "args": ["{{ROOT}}"], "parameters": {"ROOT": {"default": "/srv"}}}


def _skill(name, *servers, allowed_tools=None):
    metadata = {"name": name, "requires-mcp-servers": list(servers)}
    if allowed_tools is not None:
        metadata["allowed-tools"] = allowed_tools
    return Skill.model_validate({"metadata": metadata})


def _read(path):
    return json.loads(path.read_text())


# --- configure_skill_mcp_deps_for_agents ---

def test_one_prompt_for_two_agents(tmp_path):
    deps = collect_dependencies([_skill("A", GH_SERVER)])
    prompter = ScriptedPrompter(["s3cret"])

    summary = configure_skill_mcp_deps_for_agents(
        deps, ["claude", "cursor"], tmp_path, "local", "mcp-json", prompter=prompter, environ={}
    )

    assert len(prompter.calls) == 1
    assert prompter.calls[0].sensitive is True
    for agent_dir in (".claude", ".cursor"):
        data = _read(tmp_path / agent_dir / "mcp.json")
        assert data["mcpServers"]["gh"] == {"command": "gh-mcp", "env": {"TOKEN": "s3cret"}}
    assert summary.added == {"claude": ["gh"], "cursor": ["gh"]}
    assert summary.failed == {}


def test_existing_server_left_untouched(tmp_path):
    path = tmp_path / ".cursor" / "mcp.json"
    path.parent.mkdir()
    original = json.dumps({"mcpServers": {"fs": {"command": "my-fs", "args": ["/home"]}}})
    path.write_text(original)

    deps = collect_dependencies([_skill("A", FS_SERVER)])
    summary = configure_skill_mcp_deps_for_agents(
        deps, ["cursor"], tmp_path, "local", "mcp-json", prompter=ScriptedPrompter()
    )

    assert path.read_text() == original
    assert summary.added == {}


def test_adds_only_missing_servers(tmp_path):
    path = tmp_path / ".cursor" / "mcp.json"
    path.parent.mkdir()
    path.write_text(json.dumps({"mcpServers": {"fs": {"command": "my-fs"}}}))

    deps = collect_dependencies([_skill("A", FS_SERVER, GH_SERVER)])
    summary = configure_skill_mcp_deps_for_agents(
        deps, ["cursor"], tmp_path, "local", "mcp-json", prompter=ScriptedPrompter(["t"]), environ={}
    )

    data = _read(path)
    assert data["mcpServers"]["fs"] == {"command": "my-fs"}
    assert data["mcpServers"]["gh"]["env"] == {"TOKEN": "t"}
    assert summary.added == {"cursor": ["gh"]}


def test_empty_inputs_are_noop(tmp_path):
    prompter = ScriptedPrompter()
    deps = collect_dependencies([_skill("A", GH_SERVER)])
    assert configure_skill_mcp_deps_for_agents([], ["cursor"], tmp_path, prompter=prompter).added == {}
    assert configure_skill_mcp_deps_for_agents(deps, [], tmp_path, prompter=prompter).added == {}
    assert prompter.calls == []
    assert list(tmp_path.iterdir()) == []


def test_failure_for_one_agent_does_not_stop_batch(tmp_path):
    (tmp_path / ".cursor" / "mcp.json").mkdir(parents=True)
    deps = collect_dependencies([_skill("A", FS_SERVER)])

    summary = configure_skill_mcp_deps_for_agents(
        deps, ["cursor", "claude"], tmp_path, "local", "mcp-json", prompter=ScriptedPrompter()
    )

    assert "cursor" in summary.failed
    assert summary.added == {"claude": ["fs"]}
    assert _read(tmp_path / ".claude" / "mcp.json")["mcpServers"]["fs"] == {
        "command": "mcp-fs",
        "args": ["/srv"],
    }


def test_unknown_agent_uses_lenient_path(tmp_path):
    deps = collect_dependencies([_skill("A", FS_SERVER)])
    configure_skill_mcp_deps_for_agents(
        deps, ["Mystery Agent"], tmp_path, "local", "mcp-json", prompter=ScriptedPrompter()
    )
    assert "fs" in _read(tmp_path / ".mystery_agent" / "mcp.json")["mcpServers"]


def test_cancellation_writes_nothing(tmp_path):
    deps = collect_dependencies([_skill("A", FS_SERVER, GH_SERVER)])
    with pytest.raises(SetupCancelledError):
        configure_skill_mcp_deps_for_agents(
            deps, ["cursor"], tmp_path, "local", "mcp-json", prompter=ScriptedPrompter([None]), environ={}
        )
    assert not (tmp_path / ".cursor").exists()


def test_generator_backed_agent_is_regenerated(tmp_path):
    skills = [_skill("A", FS_SERVER, allowed_tools=["@fs/read_file"])]
    deps = collect_dependencies(skills)

    summary = configure_skill_mcp_deps_for_agents(
        deps,
        ["kiro"],
        tmp_path,
        "local",
        "agent-config",
        {"fs": ["read_file"]},
        prompter=ScriptedPrompter(),
    )

    data = _read(tmp_path / ".kiro" / "agents" / "skills-mcp.json")
    assert set(data["mcpServers"]) == {"agentskills", "fs"}
    assert data["mcpServers"]["fs"] == {"command": "mcp-fs", "args": ["/srv"]}
    assert "@fs/read_file" in data["allowedTools"]
    assert "@fs/*" not in data["allowedTools"]
    assert summary.added == {}
    assert summary.regenerated == {"kiro": ["fs"]}


def test_concurrent_batches_for_different_agents(tmp_path):
    deps = collect_dependencies([_skill("A", FS_SERVER)])
    agents = ["claude", "cursor", "cline", "roo"]

    def run(agent):
        return configure_skill_mcp_deps_for_agents(
            deps, [agent], tmp_path, "local", "mcp-json", prompter=ScriptedPrompter()
        )

    with ThreadPoolExecutor(max_workers=len(agents)) as pool:
        summaries = list(pool.map(run, agents))

    assert [s.added for s in summaries] == [{a: ["fs"]} for a in agents]
    for agent in agents:
        assert list(_read(tmp_path / f".{agent}" / "mcp.json")["mcpServers"]) == ["fs"]


# --- generate_skills_mcp_agent ---

def test_copilot_agent_file_is_additive(tmp_path):
    servers_file = tmp_path / ".vscode" / "mcp.json"
    agent_file = tmp_path / ".github" / "agents" / "skills-mcp.agent.md"

    written = generate_skills_mcp_agent("github-copilot", tmp_path, include_agent_config=False)
    assert written == [servers_file]
    assert not agent_file.exists()
    first = servers_file.read_text()
    assert "mcpServers" not in _read(servers_file)
    assert list(_read(servers_file)["servers"]) == ["agentskills"]

    written = generate_skills_mcp_agent("github-copilot", tmp_path, include_agent_config=True)
    assert written == [servers_file, agent_file]
    assert servers_file.read_text() == first
    assert frontmatter.load(str(agent_file))["name"] == "skills-mcp"


def test_generate_for_agent_without_generator(tmp_path):
    assert generate_skills_mcp_agent("cursor", tmp_path) == []


def test_generate_opencode_writes_both_files(tmp_path):
    written = generate_skills_mcp_agent("opencode", tmp_path)
    assert written == [tmp_path / "opencode.json", tmp_path / ".opencode" / "agents" / "skills-mcp.md"]
    assert _read(tmp_path / "opencode.json")["permission"]["skill"] == "deny"


def test_generate_global_scope_uses_home(tmp_path):
    home = tmp_path / "home"
    written = generate_skills_mcp_agent("kiro", tmp_path / "project", "global", home=home)
    assert written == [home / ".kiro" / "agents" / "skills-mcp.json"]


# --- run_setup ---

def test_run_setup_routes_mixed_agents(tmp_path):
    skills = [_skill("A", GH_SERVER), _skill("B", FS_SERVER)]
    prompter = ScriptedPrompter(["tok"])

    summary = run_setup(
        ["claude", "kiro", "github-copilot"], tmp_path, prompter=prompter, skills=skills, environ={}
    )

    assert len(prompter.calls) == 1
    assert set(summary.configured) == {"claude", "kiro", "github-copilot"}
    assert summary.failed == {}

    claude = _read(tmp_path / ".claude" / "mcp.json")["mcpServers"]
    assert set(claude) == {"agentskills", "gh", "fs"}

    kiro = _read(tmp_path / ".kiro" / "agents" / "skills-mcp.json")
    assert set(kiro["mcpServers"]) == {"agentskills", "gh", "fs"}
    assert not (tmp_path / ".kiro" / "settings" / "mcp.json").exists()

    vscode = _read(tmp_path / ".vscode" / "mcp.json")["servers"]
    assert set(vscode) == {"agentskills", "gh", "fs"}
    assert (tmp_path / ".github" / "agents" / "skills-mcp.agent.md").exists()
    assert summary.dependencies.added["claude"] == ["gh", "fs"]


def test_run_setup_mcp_json_override(tmp_path):
    summary = run_setup(
        ["kiro", "github-copilot"], tmp_path, config_mode="mcp-json", prompter=ScriptedPrompter(), skills=[]
    )
    assert set(summary.configured) == {"kiro", "github-copilot"}
    assert "agentskills" in _read(tmp_path / ".kiro" / "settings" / "mcp.json")["mcpServers"]
    assert "agentskills" in _read(tmp_path / ".vscode" / "mcp.json")["servers"]
    assert not (tmp_path / ".kiro" / "agents").exists()
    assert not (tmp_path / ".github").exists()


def test_run_setup_partial_failure(tmp_path):
    summary = run_setup(["cursor", "mystery"], tmp_path, prompter=ScriptedPrompter(), skills=[])
    assert list(summary.configured) == ["cursor"]
    assert "Unknown agent type: mystery" in summary.failed["mystery"]
    assert summary.any_configured


def test_run_setup_total_failure(tmp_path):
    summary = run_setup(["mystery"], tmp_path, prompter=ScriptedPrompter(), skills=[])
    assert not summary.any_configured


def test_run_setup_loads_installed_skills(tmp_path):
    skill_dir = tmp_path / ".agents" / "skills" / "fs-skill"
    skill_dir.mkdir(parents=True)
    skill_dir.joinpath("SKILL.md").write_text(
        "---\nname: fs-skill\nrequires-mcp-servers:\n  - name: fs\n    command: mcp-fs\n---\nbody\n"
    )
    summary = run_setup(["cursor"], tmp_path, prompter=ScriptedPrompter(), home=tmp_path / "home")
    assert summary.dependencies.added == {"cursor": ["fs"]}
    assert set(_read(tmp_path / ".cursor" / "mcp.json")["mcpServers"]) == {"agentskills", "fs"}


def test_run_setup_cancellation_propagates(tmp_path):
    with pytest.raises(SetupCancelledError):
        run_setup(
            ["cursor"], tmp_path, prompter=ScriptedPrompter([None]), skills=[_skill("A", GH_SERVER)], environ={}
        )


# --- existing entries in companion server files ---

DB_SERVER = {"name": "db", "command": "db-mcp"}


def test_regenerate_keeps_user_server_in_copilot_server_file(tmp_path):
    path = tmp_path / ".vscode" / "mcp.json"
    path.parent.mkdir()
    mine = {"command": "my-own-fs", "args": ["--ro"]}
    path.write_text(json.dumps({"servers": {"fs": mine}}))

    deps = collect_dependencies([_skill("A", FS_SERVER)])
    summary = configure_skill_mcp_deps_for_agents(
        deps, ["github-copilot"], tmp_path, "local", "agent-config", prompter=ScriptedPrompter()
    )

    servers = _read(path)["servers"]
    assert servers["fs"] == mine
    assert "agentskills" in servers
    assert summary.added == {}
    assert summary.regenerated == {"github-copilot": ["fs"]}


def test_regenerate_reports_server_file_additions_once(tmp_path):
    deps = collect_dependencies([_skill("A", FS_SERVER)])

    def run():
        return configure_skill_mcp_deps_for_agents(deps, ["opencode"], tmp_path, prompter=ScriptedPrompter())

    assert run().added == {"opencode": ["fs"]}
    again = run()
    assert again.added == {}
    assert again.regenerated == {"opencode": ["fs"]}


def test_run_setup_keeps_user_server_for_copilot(tmp_path):
    path = tmp_path / ".vscode" / "mcp.json"
    path.parent.mkdir()
    mine = {"command": "my-own-fs", "args": ["--ro"]}
    path.write_text(json.dumps({"servers": {"fs": mine, "agentskills": {"command": "old"}}}))

    summary = run_setup(["github-copilot"], tmp_path, prompter=ScriptedPrompter(), skills=[_skill("A", FS_SERVER)])

    servers = _read(path)["servers"]
    assert servers["fs"] == mine
    assert servers["agentskills"] == {"command": "npx", "args": ["-y", "@codemcp/agentskills-mcp"]}
    assert summary.failed == {}
    assert summary.dependencies.added == {}


def test_run_setup_keeps_disabled_opencode_server(tmp_path):
    path = tmp_path / "opencode.json"
    mine = {"type": "local", "command": ["my-own-fs"], "enabled": False}
    path.write_text(json.dumps({"mcp": {"fs": mine}}))

    summary = run_setup(
        ["opencode"], tmp_path, prompter=ScriptedPrompter(), skills=[_skill("A", FS_SERVER, DB_SERVER)]
    )

    data = _read(path)
    assert data["mcp"]["fs"] == mine
    assert data["mcp"]["db"]["command"] == ["db-mcp"]
    assert data["mcp"]["agentskills"]["command"] == ["npx", "-y", "@codemcp/agentskills-mcp"]
    assert data["permission"]["skill"] == "deny"
    assert summary.dependencies.added == {"opencode": ["db"]}


def test_remote_opencode_server_counts_as_configured(tmp_path):
    path = tmp_path / "opencode.json"
    remote = {"type": "remote", "url": "https://example.com/mcp"}
    path.write_text(json.dumps({"mcp": {"fs": remote}}))

    deps = collect_dependencies([_skill("A", FS_SERVER, DB_SERVER)])
    summary = configure_skill_mcp_deps_for_agents(
        deps, ["opencode"], tmp_path, "local", "mcp-json", prompter=ScriptedPrompter()
    )

    mcp = _read(path)["mcp"]
    assert mcp["fs"] == remote
    assert mcp["db"]["command"] == ["db-mcp"]
    assert summary.added == {"opencode": ["db"]}


@pytest.mark.skipif(not sys.platform.startswith("linux"), reason="XDG config paths apply on Linux")
def test_global_copilot_server_file_follows_injected_environment(tmp_path):
    xdg = tmp_path / "xdg"
    written = generate_skills_mcp_agent(
        "github-copilot",
        tmp_path / "project",
        "global",
        include_agent_config=False,
        home=tmp_path / "home",
        environ={"XDG_CONFIG_HOME": str(xdg)},
    )
    assert written == [xdg / "Code" / "User" / "mcp.json"]
