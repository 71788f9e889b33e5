import json

import pytest

from iniconf import IniConfig, IniJsonParser, IniYamlParser, ReadFailure

from conftest import flatten


def _cfg():
    cfg = IniConfig()
    cfg.ensure_global_section().add('log_level', 'info')
    cfg.add_section('NDBD').add('HostName', '10.0.0.1')
    cfg.add_section('NDBD').add('HostName', '10.0.0.2')
    servers = cfg.add_section('dc1.webservers')
    servers.add('host1')
    servers.add('port', '8080')
    return cfg


def test_json(tmp_path):
    cfg = _cfg()
    out = tmp_path / 'cfg.json'
    IniJsonParser(out).write(cfg)
    doc = json.loads(out.read_text(encoding='utf-8'))
    assert doc['sections'][1] == {
        'section': 'NDBD', 'options': [['HostName', '10.0.0.1']]}
    assert flatten(IniJsonParser(out).read()) == flatten(cfg)


def test_yaml(tmp_path):
    cfg = _cfg()
    out = tmp_path / 'cfg.yaml'
    IniYamlParser(out).write(cfg)
    assert flatten(IniYamlParser(out).read()) == flatten(cfg)


def test_yaml_scalars_become_strings(tmp_path):
    src = tmp_path / 'hand.yaml'
    src.write_text(
        'sections:\n'
        '- section: mysqld\n'
        '  options:\n'
        '  - [port, 3306]\n'
        '  - [skip-networking, null]\n'
        '  - [bind-address]\n',
        encoding='utf-8')
    cfg = IniYamlParser(src).read()
    assert cfg['mysqld'].to_dict() == {
        'port': '3306', 'skip-networking': '', 'bind-address': ''}


@pytest.mark.parametrize('name, text', [
    ('bad.json', '{"sections": ['),
    ('shape.json', '{"sections": [{"options": []}]}'),
    ('list.json', '[1, 2]'),
])
def test_json_malformed(tmp_path, name, text):
    src = tmp_path / name
    src.write_text(text, encoding='utf-8')
    with pytest.raises(ReadFailure):
        IniJsonParser(src).read()


@pytest.mark.parametrize('text', [
    'sections: [unclosed\n',
    'sections:\n- options: []\n',
    'sections:\n- section: x\n  options: [3]\n',
])
def test_yaml_malformed(tmp_path, text):
    src = tmp_path / 'bad.yaml'
    src.write_text(text, encoding='utf-8')
    with pytest.raises(ReadFailure):
        IniYamlParser(src).read()


def test_missing_document(tmp_path):
    with pytest.raises(ReadFailure) as e:
        IniJsonParser(tmp_path / 'missing.json').read()
    assert isinstance(e.value.__cause__, FileNotFoundError)
