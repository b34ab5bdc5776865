#!/usr/bin/python3

import httpx
import pytest

MPD_NAMESPACE = "urn:mpeg:dash:schema:mpd:2011"

STATIC_MPD = """\
<?xml version="1.0" encoding="UTF-8"?>
<!-- generated by a packager -->
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" xmlns:cenc="urn:mpeg:cenc:2013" type="static" mediaPresentationDuration="PT634.566S" minBufferTime="PT2S" profiles="urn:mpeg:dash:profile:isoff-live:2011">
  <Period id="0" start="PT0S">
    <AdaptationSet mimeType="video/mp4" segmentAlignment="true">
      <ContentProtection schemeIdUri="urn:mpeg:dash:mp4protection:2011" value="cenc" cenc:default_KID="10000000-1000-1000-1000-100000000001"/>
      <SegmentTemplate timescale="1000" media="$RepresentationID$/seg-$Number$.m4s" initialization="$RepresentationID$/init.mp4" duration="2000" startNumber="1"/>
      <Representation id="v1" bandwidth="2000000" codecs="avc1.64001f" width="1280" height="720"/>
    </AdaptationSet>
  </Period>
</MPD>
"""

EXISTING_EVENTS_MPD = """\
<?xml version="1.0" encoding="UTF-8"?>
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" type="dynamic" profiles="urn:mpeg:dash:profile:isoff-live:2011">
  <BaseURL>https://old.example.com/somewhere/else/</BaseURL>
  <Period id="p0" start="PT0S">
    <EventStream schemeIdUri="urn:scte:scte35:2013:xml" timescale="90000">
      <Event presentationTime="900000" duration="2700000" id="1"/>
    </EventStream>
    <EventStream schemeIdUri="urn:mpeg:dash:event:alternativeMPD:2022" timescale="1000">
      <Event presentationTime="1000" duration="5000">
        <AlternativeMPD uri="https://example.com/existing1.mpd" earliestResolutionTimeOffset="0" mode="insert" returnOffset="0"/>
      </Event>
      <Event presentationTime="2000" duration="6000">
        <AlternativeMPD uri="https://example.com/existing2.mpd" earliestResolutionTimeOffset="0" mode="replace" returnOffset="0"/>
      </Event>
    </EventStream>
    <AdaptationSet mimeType="audio/mp4"/>
  </Period>
</MPD>
"""

PLAIN_MPD = """\
<MPD type="static"><Period><AdaptationSet mimeType="video/mp4"/></Period></MPD>
"""

NO_PERIOD_MPD = """\
<?xml version="1.0" encoding="UTF-8"?>
<MPD xmlns="urn:mpeg:dash:schema:mpd:2011" type="static">
  <ProgramInformation/>
</MPD>
"""

MALFORMED_MPD = "<MPD><Period></MPD"


@pytest.fixture
def upstream_requests() -> list[httpx.Request]:
    # requests seen by the mock upstream server
    return []


@pytest.fixture
def upstream(upstream_requests):
    """
    Returns a factory for mock transports that serve a fixed manifest body.
    """

    def _factory(body: str = STATIC_MPD, status_code: int = 200) -> httpx.MockTransport:
        def _handler(request: httpx.Request) -> httpx.Response:
            upstream_requests.append(request)
            return httpx.Response(status_code, text=body)

        return httpx.MockTransport(_handler)

    return _factory
