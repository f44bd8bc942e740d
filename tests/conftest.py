"""Shared Doxygen XML builders for the scrape_docs tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from lxml import etree

STRUCT_XML = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygen version="1.9.8">
  <compounddef id="structai_scene" kind="struct" language="C++" prot="public">
    <compoundname>aiScene</compoundname>
    <sectiondef kind="public-attrib">
      <memberdef kind="variable" id="structai_scene_1a0" prot="public" static="no">
        <type>unsigned int</type>
        <name>mNumMeshes</name>
        <briefdescription>
<para>The number of meshes. </para>
        </briefdescription>
        <detaileddescription>
<para>The number of meshes. Zero if the scene has none. </para>
        </detaileddescription>
      </memberdef>
      <memberdef kind="variable" id="structai_scene_1a1" prot="public" static="no">
        <type>unsigned int</type>
        <name>mFlags</name>
        <briefdescription>
<para>Any combination of the AI_SCENE_FLAGS_XXX flags. </para>
        </briefdescription>
        <detaileddescription>
<para>By default this value is 0, no flags are set. </para>
        </detaileddescription>
      </memberdef>
      <memberdef kind="variable" id="structai_scene_1a2" prot="private" static="no">
        <type>void *</type>
        <name>mPrivate</name>
        <briefdescription>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
      </memberdef>
    </sectiondef>
    <sectiondef kind="public-func">
      <memberdef kind="function" id="structai_scene_1a3" prot="public" static="no">
        <type></type>
        <name>aiScene</name>
        <briefdescription>
<para>Default constructor. </para>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
      </memberdef>
    </sectiondef>
    <briefdescription>
<para>The root structure of the imported data. </para>
    </briefdescription>
    <detaileddescription>
<para>Everything that was imported from the given file can be accessed from here. </para>
    </detaileddescription>
  </compounddef>
</doxygen>
"""

FILE_XML = """<?xml version='1.0' encoding='UTF-8' standalone='no'?>
<doxygen version="1.9.8">
  <compounddef id="cimport_8h" kind="file" language="C++">
    <compoundname>cimport.h</compoundname>
    <sectiondef kind="func">
      <memberdef kind="function" id="cimport_8h_1a0" prot="public" static="no">
        <type>const struct aiScene *</type>
        <name>ImportFile</name>
        <briefdescription>
<para>Reads the given file and returns its content. </para>
        </briefdescription>
        <detaileddescription>
<para>If the call succeeds, the imported data is returned in an <ref refid="structai_scene" kindref="compound">aiScene</ref> structure.<parameterlist kind="param"><parameteritem>
<parameternamelist>
<parametername>pFile</parametername>
</parameternamelist>
<parameterdescription>
<para>Path and filename to the file to be imported. </para>
</parameterdescription>
</parameteritem>
<parameteritem>
<parameternamelist>
<parametername>pFlags</parametername>
</parameternamelist>
<parameterdescription>
<para>Optional post processing steps to be executed. </para>
</parameterdescription>
</parameteritem>
</parameterlist>
<simplesect kind="return"><para>Pointer to the imported data or NULL if the import failed. </para>
</simplesect>
<simplesect kind="note"><para>Include &lt;aiScene.h&gt; for the structure. </para>
</simplesect>
</para>
        </detaileddescription>
      </memberdef>
    </sectiondef>
    <sectiondef kind="enum">
      <memberdef kind="enum" id="cimport_8h_1a1" prot="public" static="no" strong="no">
        <type></type>
        <name>aiReturn</name>
        <enumvalue id="cimport_8h_1a2" prot="public">
          <name>aiReturn_SUCCESS</name>
          <briefdescription>
<para>Indicates that a function was successful. </para>
          </briefdescription>
          <detaileddescription>
          </detaileddescription>
        </enumvalue>
        <enumvalue id="cimport_8h_1a3" prot="public">
          <name>aiReturn_FAILURE</name>
          <briefdescription>
<para>Indicates that a function failed. </para>
          </briefdescription>
          <detaileddescription>
<para>Check the error log for details. </para>
          </detaileddescription>
        </enumvalue>
        <enumvalue id="cimport_8h_1a4" prot="public">
          <name>_AI_ENFORCE_ENUM_SIZE</name>
          <briefdescription>
          </briefdescription>
          <detaileddescription>
          </detaileddescription>
        </enumvalue>
        <briefdescription>
<para>Standard return type for some library functions. </para>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
      </memberdef>
    </sectiondef>
    <sectiondef kind="typedef">
      <memberdef kind="typedef" id="cimport_8h_1a5" prot="public" static="no">
        <type>int</type>
        <name>aiBool</name>
        <briefdescription>
<para>Boolean type used by the C API. </para>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
      </memberdef>
    </sectiondef>
    <sectiondef kind="define">
      <memberdef kind="define" id="cimport_8h_1a6" prot="public" static="no">
        <name>AI_TRUE</name>
        <briefdescription>
<para>Macro that is ignored. </para>
        </briefdescription>
        <detaileddescription>
        </detaileddescription>
      </memberdef>
    </sectiondef>
    <briefdescription>
<para>Defines the C-API to the library. </para>
    </briefdescription>
    <detaileddescription>
    </detaileddescription>
  </compounddef>
</doxygen>
"""

REMAP_RSP = """# generated by the binding tooling
--exclude
aiReturn=Ignored
--remap
aiReturn=Result
aiReturn_SUCCESS=Success
"""


def parse_fragment(xml: str) -> etree._Element:
    """Parse an XML snippet the way the scraper parses whole files."""

    parser = etree.XMLParser(remove_comments=True, remove_pis=True)
    return etree.fromstring(xml.encode("utf-8"), parser)


@pytest.fixture
def doxygen_dir(tmp_path: Path) -> Path:
    xml_dir = tmp_path / "xml"
    xml_dir.mkdir()
    (xml_dir / "structai_scene.xml").write_text(STRUCT_XML, encoding="utf-8")
    (xml_dir / "cimport_8h.xml").write_text(FILE_XML, encoding="utf-8")
    return xml_dir


@pytest.fixture
def remap_file(tmp_path: Path) -> Path:
    path = tmp_path / "assimp.rsp"
    path.write_text(REMAP_RSP, encoding="utf-8")
    return path


@pytest.fixture
def struct_compound() -> etree._Element:
    return parse_fragment(STRUCT_XML).find("compounddef")


@pytest.fixture
def file_compound() -> etree._Element:
    return parse_fragment(FILE_XML).find("compounddef")


@pytest.fixture
def remap_rules() -> dict[str, str]:
    return {"aiReturn": "Result", "aiReturn_SUCCESS": "Success"}
