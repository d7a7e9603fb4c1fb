from conftest import page

from job_capture import Extractor, SiteRule, extract


def test_linkedin_page():
    url = "https://www.linkedin.com/jobs/view/123"
    doc = page(
        '<div class="jobs-unified-top-card__company-name"><a>  Acme Corp \n</a></div>'
        '<div class="jobs-unified-top-card__job-title"><h1>Software Engineer</h1></div>'
    )
    record = extract(url, doc)
    assert record.source == "LinkedIn"
    assert record.company_name == "Acme Corp"
    assert record.position == "Software Engineer"
    assert record.department == "Engineering"
    assert record.url == url


def test_single_employer_page_uses_constant_company():
    doc = page('<h2 class="hero-headline">iOS Engineer</h2><div class="company">Not Apple</div>')
    record = extract("https://jobs.apple.com/en-us/details/xyz", doc)
    assert record.source == "Apple Jobs"
    assert record.company_name == "Apple"
    assert record.position == "iOS Engineer"
    assert record.department == "Engineering"


def test_unknown_site_uses_meta_tags():
    doc = page(
        head='<meta property="og:site_name" content="ExampleCo"><meta property="og:title" content="Product Manager">'
    )
    record = extract("https://unknownboard.example.com/posting/1", doc)
    assert record.source == "unknownboard.example.com"
    assert record.company_name == "ExampleCo"
    assert record.position == "Product Manager"
    assert record.department == "Product"


def test_unknown_site_with_only_a_title():
    doc = page(head="<title>404 Not Found</title>", body="<p>Sorry.</p>")
    record = extract("https://unknownboard.example.com/posting/404", doc)
    assert record.company_name == ""
    assert record.position == "404 Not Found"
    assert record.location == ""
    assert record.department == ""
    assert record.has_details


def test_greenhouse_page():
    doc = page(
        '<div id="header"><span class="company-name">Acme</span></div>'
        '<h1 class="app-title">Senior Product Designer</h1>'
        '<div class="location">\n  Remote, US\n</div>'
    )
    record = extract("https://boards.greenhouse.io/acme/jobs/42", doc)
    assert (record.source, record.company_name, record.position, record.location) == (
        "Greenhouse",
        "Acme",
        "Senior Product Designer",
        "Remote, US",
    )
    assert record.department == "Product"


def test_known_site_missing_position_falls_back_without_touching_company():
    doc = page(
        head='<meta property="og:site_name" content="LinkedIn"><meta property="og:title" content="Staff Designer">',
        body='<div class="jobs-unified-top-card__company-name"><a>Acme</a></div>',
    )
    record = extract("https://www.linkedin.com/jobs/view/9", doc)
    assert record.company_name == "Acme"
    assert record.position == "Staff Designer"
    assert record.department == "Design"


def test_fallback_skipped_when_primary_pass_is_complete():
    doc = page(
        '<div class="posting-headline"><h2>Sales Lead</h2></div>'
        '<div class="main-header-text"><a>Acme</a></div>'
        '<div class="fancy-address">Should not be used</div>'
    )
    record = extract("https://jobs.lever.co/acme/1", doc)
    assert record.company_name == "Acme"
    assert record.position == "Sales Lead"
    assert record.location == ""


def test_extraction_is_deterministic():
    url = "https://jobs.lever.co/acme/1"
    doc = page('<div class="posting-headline"><h2>Data Scientist</h2></div><div class="location">Austin</div>')
    assert extract(url, doc) == extract(url, doc)


def test_nothing_found_on_empty_page():
    record = extract("https://example.org/x", page())
    assert record.source == "example.org"
    assert (record.company_name, record.position, record.location, record.department) == ("", "", "", "")
    assert not record.has_details


def test_broken_document_never_raises(broken_document):
    record = extract("https://jobs.lever.co/acme/1", broken_document)
    assert record.source == "Lever"
    assert not record.has_details


def test_custom_rule_table():
    rules = (
        SiteRule(
            site_id="ashby",
            name="Ashby",
            url_patterns=("jobs.ashbyhq.com",),
            company=(".ashby-company",),
            position=(".ashby-title",),
        ),
    )
    doc = page('<span class="ashby-company">Acme</span><h1 class="ashby-title">Legal Counsel</h1>')
    record = Extractor(rules).extract("https://jobs.ashbyhq.com/acme/1", doc)
    assert (record.source, record.company_name, record.position, record.department) == (
        "Ashby",
        "Acme",
        "Legal Counsel",
        "Legal",
    )
    # LinkedIn is not in this table, so it goes through the generic path.
    assert Extractor(rules).extract("https://www.linkedin.com/jobs/view/1", page()).source == "www.linkedin.com"
