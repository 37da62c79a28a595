import cv2
import numpy as np
import pytest

from delaunay_image.config import get_active_params
from delaunay_image.detectors.bowyer_watson import super_structure_corners
from delaunay_image.errors import ImageIOError
from delaunay_image.main import build_parser, main, params_from_args
from delaunay_image.pipeline import build_low_poly, generate


def synthetic_image(h=60, w=80):
    img = np.zeros((h, w, 3), dtype=np.uint8)
    img[:] = (40, 90, 160)
    cv2.rectangle(img, (20, 15), (60, 45), (250, 250, 250), thickness=-1)
    cv2.circle(img, (15, 45), 8, (0, 200, 30), thickness=-1)
    return img


def small_params(**overrides):
    values = {"BLUR_KERNEL_SIZE": 5, "MAX_POINTS": 150}
    values.update(overrides)
    return get_active_params(values)


def test_build_low_poly_shapes_and_mesh():
    img = synthetic_image()
    result = build_low_poly(img, small_params())

    assert result.edges.shape == img.shape[:2]
    assert result.image.shape == img.shape
    assert result.image.dtype == np.uint8
    assert len(result.points) <= 150
    assert len(result.mesh) >= 2
    assert all(n in (1, 2) for n in result.mesh.edge_counts().values())


def test_pipeline_is_idempotent():
    img = synthetic_image()
    for overrides in ({}, {"GRAYSCALE": True}, {"WIREFRAME": True, "THICKNESS": 2},
                      {"DELETE_BORDER": True, "EDGE_DETECTION": "laplacian"}):
        params = small_params(**overrides)
        first = build_low_poly(img, params).image
        second = build_low_poly(img.copy(), params).image
        assert first.tobytes() == second.tobytes()


def test_grayscale_pipeline_paints_neutral_gray():
    img = synthetic_image()
    result = build_low_poly(img, small_params(GRAYSCALE=True))

    assert result.image.shape == img.shape
    channels = result.image.reshape(-1, 3)
    assert (channels == channels[:, :1]).all()


def test_delete_border_removes_corner_triangles():
    img = synthetic_image()
    result = build_low_poly(img, small_params(DELETE_BORDER=True))

    corners = set(super_structure_corners(*img.shape[:2]))
    assert all(corners.isdisjoint(t.vertices) for t in result.mesh)


def test_no_edge_points_renders_border_only():
    img = np.full((30, 30, 3), 100, dtype=np.uint8)
    # a flat image has zero gradient, which maps to 127 < 200
    result = build_low_poly(img, small_params(THRESHOLD=200))

    assert result.points == []
    assert len(result.mesh) == 2


def test_generate_writes_outputs(tmp_path):
    src = tmp_path / "in.png"
    out = tmp_path / "out" / "low_poly.png"
    mask = tmp_path / "points.png"
    cv2.imwrite(str(src), synthetic_image())

    params = small_params(INPUT=str(src), OUTPUT=str(out),
                          SHOW_EDGE_POINTS=True, OUTPUT_EDGE_POINTS=str(mask))
    result = generate(params)

    written = cv2.imread(str(out), cv2.IMREAD_COLOR)
    assert np.array_equal(written, result.image)

    points_img = cv2.imread(str(mask), cv2.IMREAD_GRAYSCALE)
    assert points_img.shape == (60, 80)
    assert set(np.unique(points_img)) <= {0, 255}
    assert int((points_img == 255).sum()) == len(set(result.points))


def test_failed_output_leaves_no_mask(tmp_path):
    src = tmp_path / "in.png"
    mask = tmp_path / "points.png"
    cv2.imwrite(str(src), synthetic_image())

    params = small_params(INPUT=str(src), OUTPUT=str(tmp_path / "out.unknownext"),
                          SHOW_EDGE_POINTS=True, OUTPUT_EDGE_POINTS=str(mask))
    with pytest.raises(ImageIOError) as info:
        generate(params)

    assert info.value.stage == "saving"
    assert not mask.exists()


def test_cli_success(tmp_path):
    src = tmp_path / "in.png"
    out = tmp_path / "out.png"
    cv2.imwrite(str(src), synthetic_image())

    code = main(["-i", str(src), "-o", str(out), "-b", "5", "-m", "80",
                 "-w", "--thickness", "2", "-d", "-v"])

    assert code == 0
    assert out.exists()


def test_cli_reports_missing_input(tmp_path, capsys):
    out = tmp_path / "out.png"
    code = main(["-i", str(tmp_path / "missing.png"), "-o", str(out)])

    assert code == 1
    assert not out.exists()
    assert "loading failed" in capsys.readouterr().out


def test_cli_reports_invalid_configuration(tmp_path, capsys):
    src = tmp_path / "in.png"
    cv2.imwrite(str(src), synthetic_image())

    code = main(["-i", str(src), "-o", str(tmp_path / "out.png"), "-t", "300"])

    assert code == 1
    assert "configuration failed" in capsys.readouterr().out


def test_cli_logging_options_stay_out_of_params(tmp_path):
    args = build_parser().parse_args(["-i", "in.png", "-o", "out.png", "-v",
                                      "--log-file", str(tmp_path / "run.log")])
    params = params_from_args(args)

    assert "VERBOSE" not in params
    assert "LOG_FILE" not in params


def test_cli_writes_log_file(tmp_path):
    src = tmp_path / "in.png"
    log = tmp_path / "run.log"
    cv2.imwrite(str(src), synthetic_image())

    code = main(["-i", str(src), "-o", str(tmp_path / "out.png"), "-b", "5",
                 "-m", "50", "-v", "--log-file", str(log)])

    assert code == 0
    assert "Output saved" in log.read_text(encoding="utf-8")
