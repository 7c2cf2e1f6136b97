from typing import Dict, List, Tuple

import pytest
import requests

_NETWORK_BLOCK_MSG = (
    "Network access is blocked during tests. Use a fake transport or mock Session.get."
)

_ASYNC_NETWORK_BLOCK_MSG = (
    "Async network access is blocked during tests. Mock aiohttp.ClientSession."
)

SAMPLE_VERSION = "20.6.1"

# SHASUMS256.txt as published for v20.6.1 (leading indentation is intentional)
SAMPLE_MANIFEST = """ea52b4feaf917e08cd2c729c1186585fcacef07c261a01310c91333b9e41d93c  node-v20.6.1-aix-ppc64.tar.gz
    9471bd6dc491e09c31b0f831f5953284b8a6842ed4ccb98f5c62d13e6086c471  node-v20.6.1-arm64.msi
    d8ba8018d45b294429b1a7646ccbeaeb2af3cdf45b5c91dabbd93e2a2035cb46  node-v20.6.1-darwin-arm64.tar.gz
    9c61b0d60fce962244d5e54549dc912e28b3c5f5e23149bfd15f66f8f7269129  node-v20.6.1-darwin-arm64.tar.xz
    365ec544c6596f194afff9a613554abfc68d4a2274181b7651386d9a11cf5862  node-v20.6.1-darwin-x64.tar.gz
    9b10c16670781e3a5af722656d28f264cdd8ebb3140f62692b33813100391349  node-v20.6.1-darwin-x64.tar.xz
    d8271461ced2887f65af413949caee19db3e80d22bbefdaf01252ca998570052  node-v20.6.1-headers.tar.gz
    60963e3ee60b6739e97e0c7b8ffb25848a82649c0c277af728400c570fd9db6d  node-v20.6.1-headers.tar.xz
    d38fe2e41e3fe8ae81b517b4cf49521f500e181e54f4c3d05e2b2d691a57b2ca  node-v20.6.1-linux-arm64.tar.gz
    6823720796b287465bb4aa8e7611143322ffd6cbdb9c6e3b149576f6d87953bf  node-v20.6.1-linux-arm64.tar.xz
    459510281ea51cf5d89fc666e36fbba80793ae4b90c3a7f89dd6666c65c825b3  node-v20.6.1-linux-armv7l.tar.gz
    9dbd4fd7f804a28de91ffb8792df6e89bbb4f934fccd013624b3dabf8bf809ac  node-v20.6.1-linux-armv7l.tar.xz
    ca00f1aa8b2535fa167258cf5f2cfce4b79d83c442dd5e46f5e17d6a5749ec0f  node-v20.6.1-linux-ppc64le.tar.gz
    27884935b025b6676e4b8737f334673ee825947d0baef61aa0326374597aeb05  node-v20.6.1-linux-ppc64le.tar.xz
    4a3f29cfc8a7ed1e9e44fcacb78e2fbaa3ce01be1efc4971a42710ad1e9e45d1  node-v20.6.1-linux-s390x.tar.gz
    3968d629989b6de16b8872b6d7ee6e6cdf1204def99c43412a6ee28203ed0022  node-v20.6.1-linux-s390x.tar.xz
    26dd13a6f7253f0ab9bcab561353985a297d927840771d905566735b792868da  node-v20.6.1-linux-x64.tar.gz
    591f9f274104f266a8cf085d2c7d5d2848ba73b98ae323d501db2d4c4b7026e5  node-v20.6.1-linux-x64.tar.xz
    d9acf82d9576dd0350c8e66b55f6fc2750fa9f4aa23d6453ffc58e32af995894  node-v20.6.1.pkg
    0053c09a01b1b355bca5af82927cae376124c13d74fa53567f08f4cfb085e6aa  node-v20.6.1.tar.gz
    3aec5e728daa38800c343b129221d3488064a2529a39bb5467bc55be226c6a2b  node-v20.6.1.tar.xz
    337549faf397deb0da3bccd4e27db45a619d89de4ea12830d16d9dfaded8e92c  node-v20.6.1-win-arm64.7z
    0e62045bfc9d7c38360bd7da152c75ed82087242d5e4b401fa23a439588d36f6  node-v20.6.1-win-arm64.zip
    c6cfe7824770a266a30bee8c33f485d0e89b94254c682250a239d83adfb7ce77  node-v20.6.1-win-x64.7z
    88371914f1f75d594bb367570e163cf5ecebeb514fd54cc765093819ebb0ed48  node-v20.6.1-win-x64.zip
    87d631b294a25386400d0f44d227330da62a1326e2a4fbb98bda3d7c431257f1  node-v20.6.1-win-x86.7z
    578cff623601aa8878a035f06edbf69190338ee3b345e7a096e804cb80c4ce24  node-v20.6.1-win-x86.zip
    5c2616da46728dd1326645c7db114e78ad87138a258c0724a035269258c23509  node-v20.6.1-x64.msi
    cb83586af83182187e760b7e01aa7c7b2bacb521d60ceefed3ac6fc62c222449  node-v20.6.1-x86.msi
    7cc3240fd7ce7926eef1cbbad33b033f7c5d97b3f3e527d65ff1e2c3f7638a11  win-arm64/node.exe
    deb027ded744371657811cfe52e774881ea928d36779924af84aa9a7a31104d2  win-arm64/node.lib
    dcb6b4bc6f2a78bf0f759853b59e94ddbe9ad6b9f32d24fdcf590d74c6350bc2  win-arm64/node_pdb.7z
    bdcd574e99646ec4a03bb13b3661c957f5a7ca837f5c33827075c4262d449689  win-arm64/node_pdb.zip
    5b824f3a375cca06dfd7dc70fa341a6ef8bb0b2e912358d8602a0c7ad273b9a4  win-x64/node.exe
    d275cfc4d637d2feaf4c39e1a5f5cd84f5b474fa713c15013e940c329feed13b  win-x64/node.lib
    fea6c0fcff45739a6e5af9843ec45455c97ff8677167bd649fd48cbef59ca52d  win-x64/node_pdb.7z
    bc13f5e63c1510cd41f82dc20725f40bbfa378252e09a00a8531cddabbf1b106  win-x64/node_pdb.zip
    837db0d8fb7fa194ebe23cd34ac7bedc02d1132de67cf4f147d694574be5cc4e  win-x86/node.exe
    a0738dec64427ae73eeb1d036081652c1c0223a679a63e0459c2af667f284f58  win-x86/node.lib
    516ac820f05eb8478be541ac12386c3b5b5c07624f73934bcf0b11a3fcdb1c95  win-x86/node_pdb.7z
    9b68f3e1f1717a2f6a090e1679f8cc627566ed064c657c35eddd0dba9484e310  win-x86/node_pdb.zip
"""

# Every artifact in SAMPLE_MANIFEST that decomposes into os/arch/format, in manifest order
SAMPLE_ARTIFACT_FILENAMES = [
    "node-v20.6.1-aix-ppc64.tar.gz",
    "node-v20.6.1-arm64.msi",
    "node-v20.6.1-darwin-arm64.tar.gz",
    "node-v20.6.1-darwin-arm64.tar.xz",
    "node-v20.6.1-darwin-x64.tar.gz",
    "node-v20.6.1-darwin-x64.tar.xz",
    "node-v20.6.1-linux-arm64.tar.gz",
    "node-v20.6.1-linux-arm64.tar.xz",
    "node-v20.6.1-linux-armv7l.tar.gz",
    "node-v20.6.1-linux-armv7l.tar.xz",
    "node-v20.6.1-linux-ppc64le.tar.gz",
    "node-v20.6.1-linux-ppc64le.tar.xz",
    "node-v20.6.1-linux-s390x.tar.gz",
    "node-v20.6.1-linux-s390x.tar.xz",
    "node-v20.6.1-linux-x64.tar.gz",
    "node-v20.6.1-linux-x64.tar.xz",
    "node-v20.6.1-win-arm64.7z",
    "node-v20.6.1-win-arm64.zip",
    "node-v20.6.1-win-x64.7z",
    "node-v20.6.1-win-x64.zip",
    "node-v20.6.1-win-x86.7z",
    "node-v20.6.1-win-x86.zip",
    "node-v20.6.1-x64.msi",
    "node-v20.6.1-x86.msi",
]


class FakeTransport:
    """Blocking transport returning canned responses and recording requested URLs."""

    def __init__(self, responses: Dict[str, Tuple[int, str]], default=(404, "")):
        self.responses = responses
        self.default = default
        self.requested: List[str] = []

    def fetch_text(self, url: str) -> Tuple[int, str]:
        self.requested.append(url)
        return self.responses.get(url, self.default)


class FakeAsyncTransport(FakeTransport):
    """Asyncio variant of FakeTransport."""

    def __init__(self, responses: Dict[str, Tuple[int, str]], default=(404, "")):
        super().__init__(responses, default)
        self.closed = False

    async def fetch_text(self, url: str) -> Tuple[int, str]:  # type: ignore[override]
        return super().fetch_text(url)

    async def close(self) -> None:
        self.closed = True


def _block_network(*_args, **_kwargs):
    """
    Prevent network calls in tests by raising a RuntimeError.

    Raises:
        RuntimeError: with `_NETWORK_BLOCK_MSG` indicating that network access is blocked during tests.
    """
    raise RuntimeError(_NETWORK_BLOCK_MSG)


async def _async_block_network(*_args, **_kwargs):
    """Async counterpart of _block_network for aiohttp entry points."""
    raise RuntimeError(_ASYNC_NETWORK_BLOCK_MSG)


def pytest_configure(config):
    """Register custom markers so strict marker checking accepts them."""
    config.addinivalue_line("markers", "asyncio: mark test as an asyncio test")
    config.addinivalue_line("markers", "unit: fast tests without I/O beyond tmp_path")
    config.addinivalue_line("markers", "configuration: configuration loading tests")


def pytest_runtest_setup():
    """
    Prevent real network requests during tests by replacing HTTP entry points with blocking callables.
    """
    requests.get = _block_network
    requests.Session.request = _block_network

    import aiohttp

    aiohttp.request = _async_block_network
    aiohttp.ClientSession._request = _async_block_network  # type: ignore[assignment]


@pytest.fixture(autouse=True)
def _isolate_test_environment(tmp_path, monkeypatch):
    """Point the user config directory at a temp dir and pin the log level env var."""
    import platformdirs

    config_dir = tmp_path / "config"
    config_dir.mkdir()
    monkeypatch.setattr(
        platformdirs, "user_config_dir", lambda *_args, **_kwargs: str(config_dir)
    )
    monkeypatch.delenv("NODEJS_RELEASE_INFO_LOG_LEVEL", raising=False)
    yield config_dir


@pytest.fixture
def sample_manifest() -> str:
    return SAMPLE_MANIFEST


@pytest.fixture
def sample_version() -> str:
    return SAMPLE_VERSION


@pytest.fixture
def sample_artifact_filenames() -> List[str]:
    return list(SAMPLE_ARTIFACT_FILENAMES)


@pytest.fixture
def fake_transport_factory():
    """Return the FakeTransport class so tests can build canned transports."""
    return FakeTransport


@pytest.fixture
def fake_async_transport_factory():
    return FakeAsyncTransport
