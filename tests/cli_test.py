from woff2otf.cli import main, parseOptions
from conftest import buildWOFF, buildSFNT
import getopt
import logging
import pytest


@pytest.fixture(autouse=True)
def restoreLogger():
	# main() configures the 'woff2otf' logger; undo it for the other tests
	logger = logging.getLogger("woff2otf")
	handlers, level, propagate = logger.handlers[:], logger.level, logger.propagate
	yield
	logger.handlers[:] = handlers
	logger.setLevel(level)
	logger.propagate = propagate


@pytest.fixture
def woffPath(tmp_path, tables):
	path = tmp_path / "Test.woff"
	path.write_bytes(buildWOFF(tables, compress=(b"glyf",)))
	return path


class ParseOptionsTest:

	def test_defaults(self):
		files, options = parseOptions(["a.woff", "b.woff"])
		assert files == ["a.woff", "b.woff"]
		assert options.outputFile is None
		assert options.outputDir is None
		assert not options.overWrite
		assert not options.recalcChecksums
		assert options.logLevel == logging.INFO

	def test_flags(self):
		files, options = parseOptions(["-y", "-v", "--recalc-checksums", "a.woff"])
		assert options.overWrite
		assert options.recalcChecksums
		assert options.logLevel == logging.DEBUG

	def test_no_input(self):
		with pytest.raises(getopt.GetoptError):
			parseOptions([])

	def test_output_file_with_many_inputs(self):
		with pytest.raises(getopt.GetoptError):
			parseOptions(["-o", "out.ttf", "a.woff", "b.woff"])

	def test_verbose_and_quiet(self):
		with pytest.raises(getopt.GetoptError):
			parseOptions(["-v", "-q", "a.woff"])

	def test_missing_output_dir(self, tmp_path):
		with pytest.raises(getopt.GetoptError):
			parseOptions(["-d", str(tmp_path / "missing"), "a.woff"])


class MainTest:

	def test_convert(self, woffPath, tables):
		assert main(["-q", str(woffPath)]) == 0
		output = woffPath.parent / "Test.ttf"
		assert output.read_bytes() == buildSFNT(tables)

	def test_otf_extension(self, tmp_path, tables):
		path = tmp_path / "Test.woff"
		path.write_bytes(buildWOFF(tables, flavour=b"OTTO"))
		assert main(["-q", str(path)]) == 0
		assert (tmp_path / "Test.otf").read_bytes() == buildSFNT(tables, flavour=b"OTTO")

	def test_output_file(self, woffPath, tmp_path, tables):
		output = tmp_path / "custom.bin"
		assert main(["-q", "-o", str(output), str(woffPath)]) == 0
		assert output.read_bytes() == buildSFNT(tables)

	def test_output_dir(self, woffPath, tmp_path, tables):
		outputDir = tmp_path / "out"
		outputDir.mkdir()
		assert main(["-q", "-d", str(outputDir), str(woffPath)]) == 0
		assert (outputDir / "Test.ttf").read_bytes() == buildSFNT(tables)

	def test_existing_output_is_kept(self, woffPath, tables):
		existing = woffPath.parent / "Test.ttf"
		existing.write_bytes(b"keep me")
		assert main(["-q", str(woffPath)]) == 0
		assert existing.read_bytes() == b"keep me"
		assert (woffPath.parent / "Test#1.ttf").read_bytes() == buildSFNT(tables)

	def test_overwrite(self, woffPath, tables):
		existing = woffPath.parent / "Test.ttf"
		existing.write_bytes(b"replace me")
		assert main(["-q", "-y", str(woffPath)]) == 0
		assert existing.read_bytes() == buildSFNT(tables)

	def test_not_a_woff(self, tmp_path):
		path = tmp_path / "Test.ttf"
		path.write_bytes(b"\0\1\0\0" + b"\0" * 8)
		assert main(["-q", str(path)]) == 1

	def test_truncated_input(self, tmp_path, woffPath):
		data = woffPath.read_bytes()
		woffPath.write_bytes(data[:60])
		assert main(["-q", str(woffPath)]) == 1

	def test_oversized_sfnt(self, tmp_path, tables):
		path = tmp_path / "Test.woff"
		path.write_bytes(buildWOFF(tables, origLengths={b"glyf": 0xFFFFFFF0}))
		assert main(["-q", "-y", str(path)]) == 1
		assert not (tmp_path / "Test.ttf").exists()

	def test_failed_output_is_removed(self, woffPath):
		data = woffPath.read_bytes()
		woffPath.write_bytes(data[:len(data) - 20])
		assert main(["-q", str(woffPath)]) == 1
		assert not (woffPath.parent / "Test.ttf").exists()

	def test_some_failures(self, tmp_path, woffPath, tables):
		missing = tmp_path / "missing.woff"
		assert main(["-q", str(missing), str(woffPath)]) == 1
		assert (woffPath.parent / "Test.ttf").read_bytes() == buildSFNT(tables)

	def test_usage_error(self, capsys):
		assert main([]) == 2
		assert "usage: woff2otf" in capsys.readouterr().err

	def test_help(self, capsys):
		with pytest.raises(SystemExit) as excinfo:
			main(["-h"])
		assert excinfo.value.code == 0
		assert "usage: woff2otf" in capsys.readouterr().out
