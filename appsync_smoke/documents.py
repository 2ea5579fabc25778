"""GraphQL documents exercised against the AppSync message API."""

MESSAGE_FIELDS = """
    id
    content
    sender
    shareId
    createdAt
    tenantID
    propertyID
    orderID
    constructionID
"""

# shareId is derived server-side as "tenantID:propertyID:orderID"
PUBLISH_CLIENT_OWNER = """
mutation PublishMessage($content: String!, $sender: String!, $tenantID: Int!, $propertyID: Int!, $orderID: Int!) {
  publishMessage(content: $content, sender: $sender, tenantID: $tenantID, propertyID: $propertyID, orderID: $orderID) {%s}
}
""" % MESSAGE_FIELDS

PUBLISH_OWNER = """
mutation PublishMessage($content: String!, $sender: String!, $shareId: String!, $constructionID: String) {
  publishMessage(content: $content, sender: $sender, shareId: $shareId, constructionID: $constructionID) {%s}
}
""" % MESSAGE_FIELDS

PUBLISH_OWNER_SIMPLE = """
mutation PublishMessage($content: String!, $sender: String!, $shareId: String!) {
  publishMessage(content: $content, sender: $sender, shareId: $shareId) {%s}
}
""" % MESSAGE_FIELDS

ON_MESSAGE = """
subscription OnMessage($shareId: String!) {
  onMessage(shareId: $shareId) {%s}
}
""" % MESSAGE_FIELDS
