# main.py
from path_tangents.app.build import build
from path_tangents.domain.paths import star_path


def run(closed: bool = True):
    app = build({"run_id": "star", "tangents": {"closed": closed}})

    path = star_path(radius=200.0, divisions=50)
    tangents = app.service.compute(path)

    # tangents are unit vectors; print a few for eyeballing
    for p, t in list(zip(path, tangents))[:5]:
        print(f"({p[0]:8.2f}, {p[1]:8.2f}) -> ({t[0]:+.3f}, {t[1]:+.3f}, {t[2]:+.3f})")
    return tangents


if __name__ == "__main__":
    run()
