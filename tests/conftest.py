import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


@pytest.fixture
def fabric_file(tmp_path):
    """Small e1,e2,e3,weight file in the layout of the published data sets."""
    path = tmp_path / "fabric.csv"
    path.write_text(
        "# e1,e2,e3,weight\n"
        "0.40,0.35,0.25,0\n"
        "0.55,0.30,0.15,1.5\n"
        "0.70,0.20,0.10,3\n"
        "\n"
        "0.85,0.10,0.05,6\n",
        encoding="utf-8",
    )
    return path
