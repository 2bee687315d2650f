import pytest

from planetviewer.shader import ShaderError, read_shader_sources

VERTEX = "#version 330 core\nlayout (location = 0) in vec3 aPos;\nvoid main() {}\n"
FRAGMENT = "#version 330 core\nout vec4 FragColor;\nvoid main() {}\n"


@pytest.fixture
def shader_files(tmp_path):
    vs = tmp_path / "vertex_shader.vs"
    fs = tmp_path / "fragment_shader.fs"
    vs.write_text(VERTEX, encoding="utf-8")
    fs.write_text(FRAGMENT, encoding="utf-8")
    return vs, fs


def test_reads_both_sources_in_order(shader_files):
    vs, fs = shader_files
    vertex, fragment = read_shader_sources(vs, fs)
    assert vertex == VERTEX
    assert fragment == FRAGMENT


def test_accepts_string_paths(shader_files):
    vs, fs = shader_files
    assert read_shader_sources(str(vs), str(fs)) == (VERTEX, FRAGMENT)


def test_empty_files_give_empty_sources(tmp_path):
    vs = tmp_path / "a.vs"
    fs = tmp_path / "a.fs"
    vs.write_text("", encoding="utf-8")
    fs.write_text("", encoding="utf-8")
    assert read_shader_sources(vs, fs) == ("", "")


def test_missing_vertex_file_raises(shader_files, tmp_path):
    _, fs = shader_files
    with pytest.raises(ShaderError):
        read_shader_sources(tmp_path / "missing.vs", fs)


def test_missing_fragment_file_raises(shader_files, tmp_path):
    vs, _ = shader_files
    with pytest.raises(ShaderError, match="missing.fs"):
        read_shader_sources(vs, tmp_path / "missing.fs")


def test_directory_instead_of_file_raises(shader_files, tmp_path):
    vs, _ = shader_files
    with pytest.raises(ShaderError):
        read_shader_sources(vs, tmp_path)