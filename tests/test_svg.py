"""Tests for the SVG back end."""

from spanview.models.enums import Layer
from spanview.models.geometry import SurfaceSize
from spanview.models.scene import TextPrimitive
from spanview.rendering.svg import SvgSceneWriter


class TestSvgSceneWriter:
    def test_produces_svg_document(self, renderer, overloaded_state, surface):
        svg = SvgSceneWriter().render(renderer.render(overloaded_state, surface))
        assert svg.startswith("<svg")
        assert svg.rstrip().endswith("</svg>")
        assert 'viewBox="0 0 960 600"' in svg
        assert 'preserveAspectRatio="xMidYMid meet"' in svg

    def test_surface_size_sets_dimensions(self, renderer, overloaded_state):
        scene = renderer.render(overloaded_state, SurfaceSize(width=1440, height=900))
        svg = SvgSceneWriter().render(scene)
        assert 'width="1440"' in svg
        assert 'height="900"' in svg
        assert 'viewBox="0 0 960 600"' in svg

    def test_one_group_per_layer(self, renderer, overloaded_state, surface):
        svg = SvgSceneWriter().render(renderer.render(overloaded_state, surface))
        for layer in Layer:
            assert f'id="layer-{layer.value}"' in svg
        assert svg.index("layer-grid") < svg.index("layer-status")

    def test_contains_every_primitive_kind(self, renderer, overloaded_state, surface):
        svg = SvgSceneWriter().render(renderer.render(overloaded_state, surface))
        for tag in ("<line ", "<polyline ", "<circle ", "<path ", "<rect ", "<text "):
            assert tag in svg
        assert 'stroke-dasharray="2 5"' in svg
        assert "Entrepreneurial Gap" in svg
        assert "This job is overloaded." in svg
        assert ">+3</text>" in svg

    def test_escapes_text(self, renderer, overloaded_state, surface):
        scene = renderer.render(overloaded_state, surface)
        scene.primitives.append(
            TextPrimitive(layer=Layer.STATUS, x=0, y=0, text="<script>&</script>")
        )
        svg = SvgSceneWriter().render(scene)
        assert "<script>" not in svg
        assert "&lt;script&gt;&amp;&lt;/script&gt;" in svg

    def test_writes_to_file(self, renderer, overloaded_state, surface, tmp_path):
        output = tmp_path / "diagram.svg"
        svg = SvgSceneWriter().render(renderer.render(overloaded_state, surface), output_path=output)
        assert output.exists()
        assert output.read_text() == svg

    def test_same_scene_same_markup(self, renderer, overloaded_state, surface):
        writer = SvgSceneWriter()
        assert writer.render(renderer.render(overloaded_state, surface)) == writer.render(
            renderer.render(overloaded_state, surface)
        )
