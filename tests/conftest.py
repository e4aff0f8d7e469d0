"""Shared test fixtures: canned feeds, pages, outlines and fragments."""

import pytest

from legisview.retrieval import RetrievalConfig
from tests.fakes import FakeFetcher

BASE = "https://www.legislation.gov.uk"
DOC = f"{BASE}/ukpga/2006/46"

PARAGRAPH = (
    "<p class=\"LegText\">A company is formed under this Act by one or more persons "
    "subscribing their names to a memorandum of association and complying with the "
    "requirements of this Act as to registration.</p>"
)


def long_body(paragraphs: int = 12) -> str:
    """Legislation-like body markup comfortably above the content threshold."""
    return (
        "<h2 class=\"LegPartTitle\">Part 1 General introductory provisions</h2>"
        "<h3 class=\"LegP1GroupTitle\">Companies U.K.</h3>"
        + PARAGRAPH * paragraphs
    )


def html_page(content: str, container: str = "<div id=\"viewLegContents\">{}</div>") -> str:
    """Wrap content markup in a page with site chrome around and inside it."""
    return (
        "<html><head><title>Companies Act 2006</title>"
        "<script>var tracking = true;</script><style>body {color: black}</style></head>"
        "<body><header><a href=\"#main\">Skip to main content</a></header>"
        "<nav class=\"LegNav\">Browse legislation</nav>"
        + container.format(
            "<div class=\"LegBreadcrumb\">Home > Acts</div>"
            "<div class=\"printOptions\">Print this page</div>"
            "<script>initViewer();</script>"
            + content
        )
        + "<footer>Crown copyright</footer></body></html>"
    )


def interstitial_page() -> str:
    """Version-selection page that still carries a content container."""
    return html_page(
        "<p>This item of legislation is available in different versions.</p>"
        "<ul><li>Latest available (Revised)</li><li>Point in Time (01/01/2020)</li>"
        "<li>Original (As enacted)</li></ul>"
        + PARAGRAPH * 10
    )


OUTLINE_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Legislation xmlns="http://www.legislation.gov.uk/namespaces/legislation"
    xmlns:ukm="http://www.legislation.gov.uk/namespaces/metadata"
    xmlns:dc="http://purl.org/dc/elements/1.1/"
    xmlns:dct="http://purl.org/dc/terms/">
  <ukm:Metadata>
    <dc:title>Companies Act 2006</dc:title>
    <dc:modified>2024-03-01</dc:modified>
    <dct:valid>2024-01-01</dct:valid>
    <ukm:PrimaryMetadata>
      <ukm:DocumentClassification>
        <ukm:DocumentStatus Value="revised"/>
      </ukm:DocumentClassification>
    </ukm:PrimaryMetadata>
  </ukm:Metadata>
  <Contents>
    <ContentsTitle>Companies Act 2006</ContentsTitle>
    <ContentsSchedules>
      <ContentsSchedule ContentRef="schedule-1" DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/schedule/1">
        <ContentsNumber>Schedule 1</ContentsNumber>
        <ContentsTitle>Connected persons</ContentsTitle>
        <ContentsItem ContentRef="schedule-1-paragraph-1" DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/schedule/1/paragraph/1">
          <ContentsNumber>1</ContentsNumber>
          <ContentsTitle>Introduction</ContentsTitle>
        </ContentsItem>
      </ContentsSchedule>
    </ContentsSchedules>
    <ContentsPart ContentRef="part-1" DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/part/1">
      <ContentsNumber>Part 1</ContentsNumber>
      <ContentsTitle>General introductory provisions</ContentsTitle>
      <ContentsChapter ContentRef="part-1-chapter-1">
        <ContentsNumber>Chapter 1</ContentsNumber>
        <ContentsItem ContentRef="section-2" DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/section/2">
          <ContentsNumber>2</ContentsNumber>
          <ContentsTitle>[F1]Companies</ContentsTitle>
        </ContentsItem>
      </ContentsChapter>
      <ContentsItem ContentRef="section-3" DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/section/3" Status="Prospective">
        <ContentsNumber>3</ContentsNumber>
        <ContentsTitle>Limited and unlimited companies</ContentsTitle>
      </ContentsItem>
    </ContentsPart>
    <ContentsItem ContentRef="section-1" DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/section/1">
      <ContentsNumber>1</ContentsNumber>
      <ContentsTitle>[F2Interpretation]</ContentsTitle>
    </ContentsItem>
  </Contents>
</Legislation>
"""

FRAGMENT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Legislation xmlns="http://www.legislation.gov.uk/namespaces/legislation"
    xmlns:ukm="http://www.legislation.gov.uk/namespaces/metadata"
    DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/section/1" NumberOfProvisions="1">
  <ukm:Metadata><ukm:Year Value="2006"/></ukm:Metadata>
  <Primary>
    <Body DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/body" NumberOfProvisions="1" RestrictExtent="E+W+S+N.I.">
      <P1group RestrictExtent="E+W+S+N.I." RestrictStartDate="2009-10-01" Status="valid">
        <Title>Companies</Title>
        <P1 id="section-1" DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/section/1" IdURI="http://www.legislation.gov.uk/id/ukpga/2006/46/section/1" class="LegP1">
          <Pnumber PuncAfter=".">1</Pnumber>
          <P1para>
            <Text><CommentaryRef Ref="c100"/>In this Act a "company" means a company formed and registered
            under <Substitution ChangeId="d1" CommentaryRef="c100">this Act</Substitution>, as
            provided by <Citation id="c00001" Class="UnitedKingdomPublicGeneralAct" Year="2006" Number="46"
            URI="http://www.legislation.gov.uk/ukpga/2006/46/section/2">section 2</Citation>.</Text>
          </P1para>
          <P1para>
            <Text><CommentaryRef Ref="c200"/><Emphasis>See also</Emphasis>
            <InternalLink Ref="section-3" xml:lang="en">section 3</InternalLink> and
            <Citation URI="http://www.legislation.gov.uk/ukpga/1985/6/section/1">section 1 of the 1985 Act</Citation>.</Text>
          </P1para>
        </P1>
      </P1group>
    </Body>
  </Primary>
  <Commentaries>
    <Commentary id="c100" Type="F">
      <Para><Text>Words in s. 1 substituted (1.10.2009) by
      <Citation URI="http://www.legislation.gov.uk/uksi/2009/1941">S.I. 2009/1941</Citation>, art. 2</Text></Para>
    </Commentary>
    <Commentary id="c200" Type="I">
      <Para><Text>S. 1 in force at 1.10.2009</Text></Para>
    </Commentary>
    <Commentary id="c300" Type="F">
      <Para><Text>Unreferenced commentary</Text></Para>
    </Commentary>
  </Commentaries>
</Legislation>
"""

WHOLE_DOCUMENT_XML = """<?xml version="1.0" encoding="UTF-8"?>
<Legislation xmlns="http://www.legislation.gov.uk/namespaces/legislation">
  <Primary>
    <Body DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/body">
      <P1group><Title>Body text</Title></P1group>
    </Body>
  </Primary>
  <Schedules DocumentURI="http://www.legislation.gov.uk/ukpga/2006/46/schedules">
    <Schedule><Title><CommentaryRef Ref="c1"/>Schedule text</Title></Schedule>
  </Schedules>
  <Commentaries>
    <Commentary id="c1" Type="F"><Para><Text>Schedule inserted</Text></Para></Commentary>
  </Commentaries>
</Legislation>
"""

FEED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
    xmlns:ukm="http://www.legislation.gov.uk/namespaces/metadata">
  <id>http://www.legislation.gov.uk/all/data.feed</id>
  <title>Search Results</title>
  <entry>
    <id>http://www.legislation.gov.uk/id/ukpga/2006/46</id>
    <title>Companies Act 2006</title>
    <link rel="self" href="http://www.legislation.gov.uk/ukpga/2006/46"/>
    <link rel="alternate" type="application/xml" href="http://www.legislation.gov.uk/ukpga/2006/46/data.xml"/>
    <link rel="alternate" type="text/html" href="http://www.legislation.gov.uk/ukpga/2006/46/contents"/>
    <updated>2024-03-01T10:00:00Z</updated>
    <summary>An Act to reform company law.</summary>
  </entry>
  <entry>
    <id>http://www.legislation.gov.uk/id/ukpga/2006/46</id>
    <title>Companies Act 2006 (as enacted)</title>
    <link rel="alternate" type="text/html" href="/ukpga/2006/46/2020-01-01/contents"/>
    <updated>2020-01-01T00:00:00Z</updated>
  </entry>
  <entry>
    <updated>2024-01-01T00:00:00Z</updated>
    <summary>Incomplete entry</summary>
  </entry>
  <entry>
    <id>http://www.legislation.gov.uk/id/uksi/2020/1234</id>
    <link rel="alternate" type="text/html" href="https://www.legislation.gov.uk/uksi/2020/1234/made"/>
    <updated>not-a-date</updated>
    <summary>   </summary>
  </entry>
</feed>
"""


@pytest.fixture
def fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def config() -> RetrievalConfig:
    return RetrievalConfig()
