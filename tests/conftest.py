import pytest

SAMPLE = """\
# options before any header
log_level = info

[NDB_MGMD DEFAULT]
DataDir = /var/lib/mysql-cluster
[MYSQLD DEFAULT]
TotalSendBufferMemory: 128M
DefaultOperationRedoProblemAction = queue
[NDBD]
HostName = 10.0.0.1
[NDBD]
HostName = 10.0.0.2
[dc1.webservers]
host1
host2
[dc2.webservers]
host3
[dc1.dbservers]
db1
"""


@pytest.fixture
def sample_text():
    return SAMPLE


@pytest.fixture
def sample_ini(tmp_path):
    path = tmp_path / 'config.ini'
    path.write_text(SAMPLE, encoding='utf-8')
    return path


def flatten(cfg):
    return [(s.name, list(s.to_dict().items())) for s in cfg.all_sections()]
