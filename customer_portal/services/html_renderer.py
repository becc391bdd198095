"""
Customer Portal - Home Page Renderer
======================================

What:  Builds the HTML landing page served at GET /.
How:   The page is composed directly as a string; there is no template
       engine. Everything except the customer table is literal text, and the
       info block is NOT derived from runtime configuration.

Page sections:
    1. Title and status banner
    2. "About This Application" info block
    3. Customer table (id, company name, email) in store order
    4. API endpoint links
    5. "How This Works" deployment steps
"""

from html import escape
from typing import Iterable

from customer_portal.schemas.customer import Customer

PAGE_TITLE = "Customer Portal - Platform Demo"

API_LINKS = ("/api/customers", "/api/health", "/api/info")

ABOUT_FIELDS = (
    ("App Name", "customer-portal"),
    ("Environment", "Development"),
    ("Region", "US East"),
    ("Developer", "Application Team"),
    ("Infrastructure", "Managed by Platform Team's webserver module"),
)

DEPLOYMENT_STEPS = (
    "Developer created a simple <code>main.tf</code> with 3 variables",
    "Used platform team's <code>webserver</code> module from private registry",
    "Terraform provisioned: VPC, subnets, security groups, EC2, and more",
    "Developer deployed the Python app - that's it!",
)

STYLESHEET = """
    body {
      font-family: 'Segoe UI', Tahoma, Geneva, Verdana, sans-serif;
      max-width: 1200px;
      margin: 0 auto;
      padding: 20px;
      background: linear-gradient(135deg, #667eea 0%, #764ba2 100%);
      min-height: 100vh;
    }
    .container {
      background: white;
      padding: 40px;
      border-radius: 12px;
      box-shadow: 0 10px 40px rgba(0,0,0,0.1);
    }
    h1 { color: #333; margin-bottom: 10px; }
    .subtitle { color: #666; margin-bottom: 30px; }
    .status {
      background: #d4edda;
      color: #155724;
      padding: 12px 20px;
      border-radius: 6px;
      border-left: 4px solid #28a745;
      margin-bottom: 30px;
    }
    .info {
      background: #f8f9fa;
      padding: 20px;
      border-radius: 8px;
      margin-bottom: 30px;
    }
    .info h3 { margin-top: 0; color: #495057; }
    table { width: 100%; border-collapse: collapse; margin-top: 20px; }
    th, td { text-align: left; padding: 12px; border-bottom: 1px solid #dee2e6; }
    th { background: #f8f9fa; font-weight: 600; color: #495057; }
    tr:hover { background: #f8f9fa; }
    .api-links {
      margin-top: 30px;
      padding: 20px;
      background: #e7f3ff;
      border-radius: 8px;
    }
    .api-links a {
      display: inline-block;
      margin: 5px 10px 5px 0;
      padding: 8px 16px;
      background: #0066cc;
      color: white;
      text-decoration: none;
      border-radius: 4px;
      font-size: 14px;
    }
    .api-links a:hover { background: #0052a3; }
    code {
      background: #f4f4f4;
      padding: 2px 6px;
      border-radius: 3px;
      font-family: 'Courier New', monospace;
    }
"""


def _render_about() -> str:
    rows = "\n".join(
        f"      <p><strong>{label}:</strong> {escape(value)}</p>"
        for label, value in ABOUT_FIELDS
    )
    return (
        '    <div class="info">\n'
        "      <h3>📊 About This Application</h3>\n"
        f"{rows}\n"
        "    </div>"
    )


def _render_customer_rows(customers: Iterable[Customer]) -> str:
    rows = []
    for customer in customers:
        rows.append(
            "          <tr>\n"
            f"            <td>{customer.id}</td>\n"
            f"            <td>{escape(customer.name)}</td>\n"
            f"            <td>{escape(customer.email)}</td>\n"
            "          </tr>"
        )
    return "\n".join(rows)


def _render_api_links() -> str:
    links = "\n".join(f'      <a href="{path}">GET {path}</a>' for path in API_LINKS)
    return (
        '    <div class="api-links">\n'
        "      <h3>🔌 API Endpoints</h3>\n"
        f"{links}\n"
        "    </div>"
    )


def _render_steps() -> str:
    steps = "\n".join(f"        <li>{step}</li>" for step in DEPLOYMENT_STEPS)
    return (
        '    <div class="info" style="margin-top: 30px;">\n'
        "      <h3>💡 How This Works</h3>\n"
        "      <ol>\n"
        f"{steps}\n"
        "      </ol>\n"
        "      <p><strong>Result:</strong> Infrastructure in 5 minutes, "
        "no AWS expertise needed! 🎉</p>\n"
        "    </div>"
    )


def render_home(customers: Iterable[Customer]) -> str:
    """
    Render the landing page for the given customers.

    Deterministic: the same customers always produce the same document.
    Customer fields are HTML-escaped; the literal sections are trusted markup.
    """
    return f"""<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{PAGE_TITLE}</title>
  <style>{STYLESHEET}  </style>
</head>
<body>
  <div class="container">
    <h1>🚀 Customer Portal</h1>
    <p class="subtitle">Deployed with Platform Team's no-code modules</p>

    <div class="status">
      ✅ Application is running successfully! Deployed using HCP Terraform no-code modules.
    </div>

{_render_about()}

    <h2>👥 Customers</h2>
    <table>
      <thead>
        <tr>
          <th>ID</th>
          <th>Company Name</th>
          <th>Email</th>
        </tr>
      </thead>
      <tbody>
{_render_customer_rows(customers)}
      </tbody>
    </table>

{_render_api_links()}

{_render_steps()}
  </div>
</body>
</html>
"""
