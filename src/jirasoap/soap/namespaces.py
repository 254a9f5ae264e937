"""XML namespaces used on the JIRA SOAP wire."""

SOAPENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
SOAPENC_NS = "http://schemas.xmlsoap.org/soap/encoding/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"
XSD_NS = "http://www.w3.org/2001/XMLSchema"
JIRA_NS = "http://soap.rpc.jira.atlassian.com"
JIRA_BEANS_NS = "http://beans.soap.rpc.jira.atlassian.com"

NSMAP = {
    "soapenv": SOAPENV_NS,
    "soapenc": SOAPENC_NS,
    "xsi": XSI_NS,
    "xsd": XSD_NS,
    "soap": JIRA_NS,
    "beans": JIRA_BEANS_NS,
}

XSI_TYPE = f"{{{XSI_NS}}}type"
XSI_NIL = f"{{{XSI_NS}}}nil"
SOAPENC_ARRAY_TYPE = f"{{{SOAPENC_NS}}}arrayType"
